"""The helper orchestrating parsing, validation and execution of operations."""

import logging
from contextlib import nullcontext
from typing import Any, Dict, Optional, Sequence, Type

from graphql import (
    DocumentNode,
    ExecutionResult,
    GraphQLError,
    OperationType,
    execute_sync,
    get_operation_ast,
    parse,
    validate,
    validate_schema,
)
from graphql.pyutils import Undefined

from .debug import DebugFlag
from .diagnostics import DiagnosticSink
from .error import ConfigurationError, RequestError, is_client_safe
from .operation_params import OperationParams, validate_operation_params
from .persisted_queries import PersistedQueryErrors
from .result import OperationResult
from .server_config import ServerConfig
from .validation_policy import RuleType

__all__ = ["Helper", "execute_operation"]

logger = logging.getLogger(__name__)


class Helper:
    """Helper executing GraphQL operations on behalf of a server.

    The helper drives the whole pipeline for a single operation: it obtains the
    document by parsing the query or by loading a persisted query, runs the
    validation rules chosen by the validation policy, executes the document and
    assembles the result.

    Errors in the request are reported inside the result. Errors in the server
    configuration are raised as :class:`ConfigurationError` instead.
    """

    diagnostic_sink_class: Type[DiagnosticSink] = DiagnosticSink

    def execute_operation(
        self, config: ServerConfig, params: OperationParams
    ) -> OperationResult:
        """Execute the operation with the given parameters.

        Always returns synchronously with a completely resolved result.
        """
        schema = config.schema
        if schema is None:
            raise ConfigurationError(
                "Schema is required for the server to execute operations."
            )
        schema_errors = validate_schema(schema)
        if schema_errors:
            messages = " ".join(error.message for error in schema_errors)
            raise ConfigurationError(f"Invalid schema: {messages}")

        errors: Sequence[GraphQLError] = validate_operation_params(params)
        if errors:
            logger.debug("Invalid operation parameters: %s", errors)
            return self.build_result(config, errors=errors)

        try:
            document = self.load_document(config, params)
        except GraphQLError as error:
            return self.build_result(config, errors=[error])

        operation = get_operation_ast(document, params.operation_name)
        operation_type = operation.operation if operation else None
        if params.read_only and operation_type not in (None, OperationType.QUERY):
            return self.build_result(
                config, errors=[RequestError("GET supports only query operation")]
            )

        rules = self.resolve_validation_rules(config, params)
        if rules:
            errors = validate(schema, document, rules)
            if errors:
                logger.debug("Operation did not pass validation: %s", errors)
                return self.build_result(config, errors=errors)
        else:
            logger.debug("Skipping validation of operation.")

        root_value = self.resolve_root_value(config, params, document, operation_type)
        context_value = self.resolve_context_value(
            config, params, document, operation_type
        )

        variables = params.variables
        if variables is not None and not isinstance(variables, dict):
            variables = dict(variables)

        debug = config.debug
        sink = (
            self.diagnostic_sink_class()
            if debug & DebugFlag.CAPTURE_WARNINGS
            else None
        )
        with sink.capture() if sink is not None else nullcontext():
            result = execute_sync(
                schema,
                document,
                root_value,
                context_value,
                variables,
                params.operation_name,
                field_resolver=config.field_resolver,
                middleware=config.middleware,
            )

        if debug & DebugFlag.RETHROW_INTERNAL_EXCEPTIONS:
            self.rethrow_internal_exceptions(result)

        extensions: Dict[str, Any] = dict(result.extensions or {})
        if sink:
            extensions["warnings"] = sink.formatted
        return self.build_result(
            config,
            data=self.result_data(result),
            errors=result.errors,
            extensions=extensions,
        )

    def load_document(
        self, config: ServerConfig, params: OperationParams
    ) -> DocumentNode:
        """Get the document for the given operation.

        Parses the query text, or loads the persisted query if a query id was given.
        Raises a GraphQLError if the query is not syntactically valid.
        """
        query = params.query
        if not query:
            query = self.load_persisted_query(config, params)
            if isinstance(query, DocumentNode):
                return query
        return parse(query)

    def load_persisted_query(
        self, config: ServerConfig, params: OperationParams
    ) -> Any:
        """Load the persisted query with the query id of the given operation.

        Depending on the configured policy, exceptions raised by the loader are
        either raised to the caller or reported as errors of the request.
        """
        loader = config.persisted_query_loader
        if not loader.enabled:
            raise ConfigurationError(
                "Persisted queries are not supported by this server"
            )
        query_id = params.query_id
        logger.debug("Loading persisted query %r with %r.", query_id, loader)
        try:
            return loader(query_id, params)  # type: ignore
        except (ConfigurationError, GraphQLError):
            raise
        except Exception as error:
            if config.persisted_query_errors is not PersistedQueryErrors.REPORT:
                raise
            logger.warning("Cannot load persisted query %r: %s", query_id, error)
            raise GraphQLError(str(error), original_error=error) from error

    def resolve_validation_rules(
        self, config: ServerConfig, params: OperationParams
    ) -> Sequence[RuleType]:
        """Get the validation rules for the given operation."""
        return config.validation_rules.rules_for(params)

    def resolve_root_value(
        self,
        config: ServerConfig,
        params: OperationParams,
        document: DocumentNode,
        operation_type: Optional[OperationType],
    ) -> Any:
        """Get the root value for the given operation."""
        root_value = config.root_value
        if callable(root_value):
            root_value = root_value(params, document, operation_type)
        return root_value

    def resolve_context_value(
        self,
        config: ServerConfig,
        params: OperationParams,
        document: DocumentNode,
        operation_type: Optional[OperationType],
    ) -> Any:
        """Get the context value for the given operation.

        The same context object is shared by all resolvers of the operation.
        """
        context_value = config.context_value
        if callable(context_value):
            context_value = context_value(params, document, operation_type)
        return context_value

    @staticmethod
    def result_data(result: ExecutionResult) -> Any:
        """Get the data of an execution result.

        Errors without a path occurred before execution could start (e.g. when
        coercing the variable values), so there is no data at all in this case.
        """
        data, errors = result.data, result.errors
        if data is None and errors and all(error.path is None for error in errors):
            return Undefined
        return data

    @staticmethod
    def rethrow_internal_exceptions(result: ExecutionResult) -> None:
        """Raise the first exception that is not safe to be shown to clients."""
        for error in result.errors or ():
            if not is_client_safe(error):
                raise error.original_error  # type: ignore

    @staticmethod
    def build_result(
        config: ServerConfig,
        data: Any = Undefined,
        errors: Optional[Sequence[GraphQLError]] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> OperationResult:
        """Assemble the result of an operation."""
        debug = config.debug
        if errors and not debug & DebugFlag.INCLUDE_DEBUG_MESSAGE:
            for error in errors:
                if not is_client_safe(error):
                    logger.warning(
                        "Internal error at %s: %s",
                        error.path,
                        error.message,
                        exc_info=error.original_error,
                    )
        return OperationResult(
            data, errors, extensions, debug, config.error_formatter
        )


_default_helper = Helper()


def execute_operation(
    config: ServerConfig, params: OperationParams
) -> OperationResult:
    """Execute a GraphQL operation with the given server configuration.

    Shortcut for calling :meth:`Helper.execute_operation` on a default helper.
    """
    return _default_helper.execute_operation(config, params)
