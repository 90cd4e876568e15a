"""Server errors

Configuration errors are raised to the caller of the server, while errors of the
request itself are reported inside the result.
"""

from traceback import FrameSummary, extract_tb
from typing import Iterable, List, Optional

from graphql import GraphQLError

__all__ = [
    "ClientSafeError",
    "ConfigurationError",
    "RequestError",
    "format_stack",
    "format_traceback",
    "is_client_safe",
]


class ConfigurationError(Exception):
    """The server has been set up in a way that does not allow to serve a request.

    This is never reported inside a result, but always raised to the caller.
    """


class RequestError(GraphQLError):
    """The request itself is malformed.

    Reported inside the result like any other error in the query document.
    """


class ClientSafeError(Exception):
    """Exception raised by a resolver with a message that can be shown to clients.

    The message of other exceptions raised by resolvers is replaced with a generic
    message when the server is not in debug mode.
    """


def is_client_safe(error: GraphQLError) -> bool:
    """Check whether the message of the given error may be shown to clients."""
    original_error = error.original_error
    return original_error is None or isinstance(
        original_error, (GraphQLError, ClientSafeError)
    )


def format_stack(stack: Iterable[FrameSummary]) -> List[str]:
    """Format the given stack frames as short strings."""
    return [f"{frame.filename}:{frame.lineno} in {frame.name}" for frame in stack]


def format_traceback(error: Optional[BaseException]) -> List[str]:
    """Format the traceback of the given exception as short strings."""
    if error is None:
        return []
    return format_stack(extract_tb(error.__traceback__))
