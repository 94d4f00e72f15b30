class FormHelperException(Exception):
    """Base exception class."""

    pass


class InvalidArgument(FormHelperException, ValueError):
    """A form builder was given an argument it can't work with, e.g. an
    empty top-level form name."""

    def __init__(self, message: str, value: object = None):
        self.value = value
        super().__init__(message)
