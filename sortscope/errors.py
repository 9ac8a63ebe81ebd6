class SortScopeError(Exception):
    """
    Base class for errors raised by sortscope.
    Message is a short explanation.
    Explanation is a longer explanation of the error.
    """

    def __init__(self, message, explanation=""):
        super().__init__(message)
        self.message = message
        self.explanation = explanation

    def __str__(self):
        return self.message


class SnapshotLimitError(SortScopeError):
    """Step display was requested for a sequence that is too long to print."""


class InvalidRangeError(SortScopeError):
    """A random array was requested with an empty value range or no length."""
