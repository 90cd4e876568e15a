"""Debug flags controlling how much detail a result exposes."""

from enum import IntFlag
from typing import Union

from graphql.pyutils import inspect

from .error import ConfigurationError

__all__ = ["DebugFlag", "debug_flags"]


class DebugFlag(IntFlag):
    """Debug options of a server.

    Debug mode never decides *whether* an error is reported, only how much
    detail is exposed about it.
    """

    NONE = 0
    INCLUDE_DEBUG_MESSAGE = 1  # expose true messages of internal exceptions
    INCLUDE_TRACE = 2  # add a trace to errors caused by exceptions
    CAPTURE_WARNINGS = 4  # collect runtime warnings into the extensions
    RETHROW_INTERNAL_EXCEPTIONS = 8  # raise internal exceptions to the caller

    # what a plain ``debug=True`` stands for
    ALL = INCLUDE_DEBUG_MESSAGE | INCLUDE_TRACE | CAPTURE_WARNINGS


_all_flags = int(DebugFlag.ALL | DebugFlag.RETHROW_INTERNAL_EXCEPTIONS)


def debug_flags(value: Union[bool, int, DebugFlag, None]) -> DebugFlag:
    """Coerce a configured debug value into debug flags."""
    if value is None or value is False:
        return DebugFlag.NONE
    if value is True:
        return DebugFlag.ALL
    if isinstance(value, int) and not value & ~_all_flags:
        return DebugFlag(value)
    raise ConfigurationError(
        f"Expected debug to be a bool or DebugFlag, but got: {inspect(value)}."
    )
