"""Operation result

The structured envelope returned for every executed operation.
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from graphql import GraphQLError
from graphql.pyutils import Undefined, UndefinedType

from .debug import DebugFlag
from .error import format_traceback, is_client_safe
from .server_config import ErrorFormatter

__all__ = ["OperationResult", "format_error", "internal_error_message"]


internal_error_message = "Internal server error"


def format_error(
    error: GraphQLError, debug: DebugFlag = DebugFlag.NONE
) -> Dict[str, Any]:
    """Format a GraphQL error for the response.

    Besides the entries described by the "Response Format, Errors" section of the
    GraphQL specification, a trace of the original exception is added when the
    debug flags ask for it. Messages of internal exceptions are only shown in debug
    mode, otherwise they are replaced with a generic message.
    """
    formatted = error.formatted
    if not (debug & DebugFlag.INCLUDE_DEBUG_MESSAGE or is_client_safe(error)):
        formatted["message"] = internal_error_message
    if debug & DebugFlag.INCLUDE_TRACE and error.original_error is not None:
        formatted["trace"] = format_traceback(error.original_error)
    return formatted


class OperationResult:
    """The result of a GraphQL operation executed by the server.

    - ``data`` is the result of the execution. It is ``Undefined`` if the operation
      has never been executed, e.g. because it did not pass validation.
    - ``errors`` contains all errors that occurred, in the order of their occurrence.
    - ``extensions`` is reserved for adding non-standard properties.

    The result cannot be changed after it has been created.
    """

    data: Union[Dict[str, Any], None, UndefinedType]
    errors: Sequence[GraphQLError]
    extensions: Optional[Dict[str, Any]]
    debug: DebugFlag
    error_formatter: Optional[ErrorFormatter]

    __slots__ = "data", "errors", "extensions", "debug", "error_formatter"

    def __init__(
        self,
        data: Union[Dict[str, Any], None, UndefinedType] = Undefined,
        errors: Optional[Sequence[GraphQLError]] = None,
        extensions: Optional[Dict[str, Any]] = None,
        debug: DebugFlag = DebugFlag.NONE,
        error_formatter: Optional[ErrorFormatter] = None,
    ) -> None:
        set_ = object.__setattr__
        set_(self, "data", data)
        set_(self, "errors", tuple(errors or ()))
        set_(self, "extensions", extensions or None)
        set_(self, "debug", debug)
        set_(self, "error_formatter", error_formatter)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable.")

    def __repr__(self) -> str:
        name = self.__class__.__name__
        ext = "" if self.extensions is None else f", extensions={self.extensions!r}"
        return f"{name}(data={self.data!r}, errors={list(self.errors)!r}{ext})"

    def __iter__(self) -> Iterator[Any]:
        return iter((self.data, self.errors))

    @property
    def executed(self) -> bool:
        """Whether the operation has been executed."""
        return self.data is not Undefined

    @property
    def formatted_errors(self) -> List[Dict[str, Any]]:
        """Get the errors formatted for the response."""
        formatter = self.error_formatter or format_error
        debug = self.debug
        return [formatter(error, debug) for error in self.errors]

    @property
    def formatted(self) -> Dict[str, Any]:
        """Get the result formatted for the response.

        The ``data`` entry is missing if the operation has not been executed, the
        ``errors`` entry is missing if no errors occurred, and the ``extensions``
        entry is missing if there are no extensions.
        """
        formatted: Dict[str, Any] = {}
        if self.data is not Undefined:
            formatted["data"] = self.data
        if self.errors:
            formatted["errors"] = self.formatted_errors
        if self.extensions:
            formatted["extensions"] = self.extensions
        return formatted

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, dict):
            return other == self.formatted
        if isinstance(other, tuple):
            if len(other) == 2:
                return other == (self.data, list(self.errors) or None)
            return other == (self.data, list(self.errors) or None, self.extensions)
        return (
            isinstance(other, self.__class__)
            and other.data == self.data
            and other.errors == self.errors
            and other.extensions == self.extensions
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    __hash__ = None  # type: ignore
