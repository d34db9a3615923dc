"""Exceptions raised while computing a student's standing."""


class StandingError(Exception):
    """Base class for all errors raised by :mod:`standing`."""


class InvalidEntryError(StandingError, ValueError):
    """A grade entry was constructed from invalid data.

    Raised, for instance, when an entry has zero points possible. Such an
    entry is rejected outright rather than being counted as a 0%.

    Attributes
    ----------
    field : str
        The name of the offending field.
    value
        The offending value.

    """

    def __init__(self, field, value, message=None):
        self.field = field
        self.value = value
        if message is None:
            message = f"Invalid value for {field!r}: {value!r}."
        super().__init__(message)
