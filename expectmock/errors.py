"""Exceptions raised when a mock is used contrary to its expectations."""


class MockError(AssertionError):
    """A mock was called in a way its expectations do not allow.

    It derives from AssertionError so that test runners report it as a
    failed assertion, not as an error in the code under test.
    """


class SequenceError(MockError):
    """Expectations belonging to a sequence were called out of order."""