"""Server configuration"""

from typing import Any, Callable, Dict, Optional, Union

from graphql import GraphQLError, GraphQLFieldResolver, GraphQLSchema
from graphql.execution import Middleware
from graphql.pyutils import inspect

from .debug import DebugFlag, debug_flags
from .error import ConfigurationError
from .persisted_queries import (
    PersistedQueryErrors,
    PersistedQueryLoader,
    persisted_query_loader,
)
from .validation_policy import ValidationPolicy, validation_policy

__all__ = ["ErrorFormatter", "ServerConfig"]


ErrorFormatter = Callable[[GraphQLError, DebugFlag], Dict[str, Any]]


class ServerConfig:
    """Configuration of a GraphQL server.

    The configuration is shared by all requests served by the same server and must
    not be changed while a request is being executed.

    Accepts the following options:

    :arg schema:
      The GraphQL type system to use when validating and executing operations.
    :arg root_value:
      The value provided as the first argument to the resolvers of the root type.
      Can also be a function of the operation parameters, the document and the
      operation type, returning the root value for a request.
    :arg context_value:
      The context value passed as ``info.context`` to all resolvers. This is one
      shared object for the whole request, so changes that resolvers make to it
      are visible to the resolvers running after them and to the caller. Can also
      be a function like ``root_value``.
    :arg debug:
      True, False or a combination of :class:`DebugFlag` values.
    :arg validation_rules:
      None for the rules defined by the GraphQL specification, a collection of
      validation rule classes (an empty collection skips validation), or a function
      returning such a collection for the given operation parameters.
    :arg persisted_query_loader:
      None if persisted queries are not supported, a mapping of query ids to
      queries, or a function taking the query id and the operation parameters and
      returning the query text or the parsed document.
    :arg persisted_query_errors:
      How exceptions raised by the persisted query loader are handled.
    :arg field_resolver:
      A resolver function to use when one is not provided by the schema.
    :arg middleware:
      The middleware to wrap the resolvers with.
    :arg error_formatter:
      A function taking an error and the debug flags and returning the formatted
      error, replacing the default formatting.
    """

    _debug: DebugFlag
    _validation_policy: ValidationPolicy
    _persisted_query_loader: PersistedQueryLoader

    options = (
        "schema",
        "root_value",
        "context_value",
        "debug",
        "validation_rules",
        "persisted_query_loader",
        "persisted_query_errors",
        "field_resolver",
        "middleware",
        "error_formatter",
    )

    def __init__(
        self,
        schema: Optional[GraphQLSchema] = None,
        root_value: Any = None,
        context_value: Any = None,
        debug: Union[bool, DebugFlag] = False,
        validation_rules: Any = None,
        persisted_query_loader: Any = None,
        persisted_query_errors: PersistedQueryErrors = PersistedQueryErrors.RAISE,
        field_resolver: Optional[GraphQLFieldResolver] = None,
        middleware: Optional[Middleware] = None,
        error_formatter: Optional[ErrorFormatter] = None,
    ) -> None:
        if schema is not None and not isinstance(schema, GraphQLSchema):
            raise ConfigurationError(
                f"Expected {inspect(schema)} to be a GraphQL schema."
            )
        if not isinstance(persisted_query_errors, PersistedQueryErrors):
            try:
                persisted_query_errors = PersistedQueryErrors(persisted_query_errors)
            except ValueError as error:
                raise ConfigurationError(str(error)) from error
        self.schema = schema
        self.root_value = root_value
        self.context_value = context_value
        self.debug = debug  # type: ignore
        self.validation_rules = validation_rules
        self.persisted_query_loader = persisted_query_loader
        self.persisted_query_errors = persisted_query_errors
        self.field_resolver = field_resolver
        self.middleware = middleware
        self.error_formatter = error_formatter

    @classmethod
    def create(cls, **options: Any) -> "ServerConfig":
        """Create a server configuration from the given options."""
        for name in options:
            if name not in cls.options:
                raise ConfigurationError(f"Unknown server config option: '{name}'.")
        return cls(**options)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}"
            f" debug={self.debug!r}"
            f" validation_rules={self.validation_rules!r}"
            f" persisted_query_loader={self.persisted_query_loader!r}>"
        )

    @property
    def debug(self) -> DebugFlag:
        """The debug flags of the server."""
        return self._debug

    @debug.setter
    def debug(self, value: Union[bool, DebugFlag]) -> None:
        self._debug = debug_flags(value)

    @property
    def validation_rules(self) -> ValidationPolicy:
        """The policy deciding about the validation rules of an operation."""
        return self._validation_policy

    @validation_rules.setter
    def validation_rules(self, value: Any) -> None:
        self._validation_policy = validation_policy(value)

    @property
    def persisted_query_loader(self) -> PersistedQueryLoader:
        """The loader used for persisted queries."""
        return self._persisted_query_loader

    @persisted_query_loader.setter
    def persisted_query_loader(self, value: Any) -> None:
        self._persisted_query_loader = persisted_query_loader(value)
