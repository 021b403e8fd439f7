# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Exception types raised by the devtools helpers when a required argument is missing
# or an index/length argument falls outside its allowed range
# Acknowledgements: Python built-in exception hierarchy (ValueError, IndexError)

"""Exceptions raised by devtools helpers.

Two error kinds cover every precondition the helpers check:

- NullArgumentError: a required sequence or callable was None
- OutOfRangeError: an index, length or layer argument violates its bound

Both derive from DevToolsError so callers can catch the package's errors as a
group, and from the closest built-in (ValueError / IndexError) so generic
handlers keep working.
"""
from typing import Any, Optional


class DevToolsError(Exception):
    """Base class for all devtools errors."""


class NullArgumentError(DevToolsError, ValueError):
    """A required argument was None."""

    def __init__(self, param_name: str, message: Optional[str] = None):
        self.param_name = param_name
        super().__init__(message or f"Argument '{param_name}' must not be None")


class OutOfRangeError(DevToolsError, IndexError):
    """An index or length argument is outside its allowed range.

    Attributes:
        param_name: Name of the offending argument
        value: The rejected value (None when several arguments are at fault)
    """

    def __init__(self, param_name: str, value: Any = None, message: Optional[str] = None):
        self.param_name = param_name
        self.value = value
        if message is None:
            message = f"Argument '{param_name}' is out of range (got {value!r})"
        super().__init__(message)
