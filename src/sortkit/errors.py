"""Error definitions for SORTKIT.

The sorting functions themselves have no failure channel: exceptions raised by
user-supplied comparators propagate unchanged. The errors below cover the
configuration and input-parsing layers around them.
"""

# ============================================================================
#                               Base error
# ============================================================================


class SortkitError(Exception):
    """Base class for all SORTKIT errors."""


# ============================================================================
#                           Configuration errors
# ============================================================================


class ConfigError(SortkitError):
    """Base class for configuration errors."""


class InvalidParallelismError(ConfigError):
    """Raised when a configured parallelism budget is not a positive integer."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid parallelism {value!r}: expected a positive integer"
        )


# ============================================================================
#                               Input errors
# ============================================================================


class InputError(SortkitError):
    """Base class for errors raised while reading items to sort."""


class InvalidNumberError(InputError):
    """Raised when a line cannot be parsed as a number in numeric mode."""

    def __init__(self, line_number: int, text: str) -> None:
        self.line_number = line_number
        self.text = text
        super().__init__(f"Line {line_number}: {text!r} is not a number")
