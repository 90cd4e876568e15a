"""Persisted queries

Lookup of queries that are referenced by an opaque id instead of being sent as text.
"""

import logging
from enum import Enum
from typing import Any, Callable, Mapping, Union

from graphql import DocumentNode
from graphql.pyutils import inspect

from .error import ConfigurationError, RequestError
from .operation_params import OperationParams

__all__ = [
    "CallableQueryLoader",
    "MappingQueryLoader",
    "NoPersistedQueryLoader",
    "PersistedQuery",
    "PersistedQueryErrors",
    "PersistedQueryLoader",
    "persisted_query_loader",
]

logger = logging.getLogger(__name__)


PersistedQuery = Union[str, DocumentNode]

LoaderFunction = Callable[[str, OperationParams], PersistedQuery]


class PersistedQueryErrors(Enum):
    """How exceptions raised while loading a persisted query are handled."""

    # raise to the caller, unless the loader raised a GraphQLError on purpose
    RAISE = "raise"
    # report every exception as an error inside the result
    REPORT = "report"


class PersistedQueryLoader:
    """Base class of all persisted query loaders."""

    __slots__ = ()

    enabled = True

    def load(self, query_id: str, params: OperationParams) -> PersistedQuery:
        """Load the query with the given id.

        Returns either the query text or an already parsed document.
        """
        raise NotImplementedError

    def __call__(self, query_id: str, params: OperationParams) -> PersistedQuery:
        query = self.load(query_id, params)
        if not isinstance(query, (str, DocumentNode)):
            raise ConfigurationError(
                "Persisted query loader must return query string"
                f" or instance of DocumentNode, but got: {inspect(query)}."
            )
        return query


class NoPersistedQueryLoader(PersistedQueryLoader):
    """Persisted queries are not supported."""

    __slots__ = ()

    enabled = False

    def load(self, query_id: str, params: OperationParams) -> PersistedQuery:
        raise ConfigurationError("Persisted queries are not supported by this server")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class CallableQueryLoader(PersistedQueryLoader):
    """Load persisted queries with a function of the query id and the parameters."""

    function: LoaderFunction

    __slots__ = ("function",)

    def __init__(self, function: LoaderFunction) -> None:
        self.function = function

    def load(self, query_id: str, params: OperationParams) -> PersistedQuery:
        return self.function(query_id, params)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.function!r})"


class MappingQueryLoader(PersistedQueryLoader):
    """Load persisted queries from a mapping of query ids to queries.

    Unknown query ids are reported as errors in the request.
    """

    queries: Mapping[str, PersistedQuery]

    __slots__ = ("queries",)

    def __init__(self, queries: Mapping[str, PersistedQuery]) -> None:
        self.queries = queries

    def load(self, query_id: str, params: OperationParams) -> PersistedQuery:
        try:
            return self.queries[query_id]
        except KeyError:
            logger.debug("Unknown persisted query id %r.", query_id)
            raise RequestError(f"Persisted query '{query_id}' not found.") from None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<{len(self.queries)} queries>)"


def persisted_query_loader(value: Any) -> PersistedQueryLoader:
    """Get the persisted query loader for the given configuration value.

    The value can be None (persisted queries are disabled), a loader, a mapping of
    query ids to queries, or a function taking the query id and the operation
    parameters and returning the query text or document.
    """
    if value is None:
        return NoPersistedQueryLoader()
    if isinstance(value, PersistedQueryLoader):
        return value
    if isinstance(value, Mapping):
        return MappingQueryLoader(value)
    if callable(value):
        return CallableQueryLoader(value)
    raise ConfigurationError(
        "Expected persisted query loader to be a mapping or a function,"
        f" but got: {inspect(value)}."
    )
