"""Error types raised by the domain layer."""


class InvalidInput(ValueError):
    """
    Raised when external input cannot be turned into a valid value.

    Covers malformed decimal strings, out-of-range digits, empty digit
    sequences, malformed JSON, negative arguments and missing or mistyped
    form fields. It is always raised at construction or validation time;
    arithmetic on an already constructed value never raises it.
    """
