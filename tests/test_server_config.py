from pytest import mark, raises

from graphql import GraphQLObjectType, GraphQLField, GraphQLSchema, GraphQLString
from graphql.validation import FieldsOnCorrectTypeRule

from graphql_server_helper import (
    SKIP_VALIDATION,
    ConfigurationError,
    DebugFlag,
    DefaultRules,
    DynamicRules,
    MappingQueryLoader,
    NoPersistedQueryLoader,
    PersistedQueryErrors,
    ServerConfig,
    StaticRules,
)
from graphql_server_helper.debug import debug_flags

schema = GraphQLSchema(GraphQLObjectType("Query", {"a": GraphQLField(GraphQLString)}))


def describe_server_config():
    def has_defaults():
        config = ServerConfig()
        assert config.schema is None
        assert config.root_value is None
        assert config.context_value is None
        assert config.debug == DebugFlag.NONE
        assert config.validation_rules == DefaultRules()
        assert isinstance(config.persisted_query_loader, NoPersistedQueryLoader)
        assert config.persisted_query_errors is PersistedQueryErrors.RAISE
        assert config.field_resolver is None
        assert config.middleware is None
        assert config.error_formatter is None

    def accepts_options():
        context = object()
        config = ServerConfig(
            schema,
            root_value="root",
            context_value=context,
            debug=True,
            validation_rules=[FieldsOnCorrectTypeRule],
            persisted_query_loader={"some-id": "{ a }"},
            persisted_query_errors="report",  # type: ignore
        )
        assert config.schema is schema
        assert config.root_value == "root"
        assert config.context_value is context
        assert config.debug == DebugFlag.ALL
        assert config.validation_rules == StaticRules([FieldsOnCorrectTypeRule])
        assert isinstance(config.persisted_query_loader, MappingQueryLoader)
        assert config.persisted_query_errors is PersistedQueryErrors.REPORT

    def coerces_options_on_assignment():
        config = ServerConfig(schema)
        config.validation_rules = []
        assert config.validation_rules == SKIP_VALIDATION
        config.validation_rules = lambda params: []
        assert isinstance(config.validation_rules, DynamicRules)
        config.validation_rules = None
        assert config.validation_rules == DefaultRules()
        config.persisted_query_loader = {}
        assert isinstance(config.persisted_query_loader, MappingQueryLoader)
        config.persisted_query_loader = None
        assert isinstance(config.persisted_query_loader, NoPersistedQueryLoader)
        config.debug = DebugFlag.INCLUDE_TRACE
        assert config.debug == DebugFlag.INCLUDE_TRACE
        config.debug = False
        assert config.debug == DebugFlag.NONE

    def rejects_invalid_schemas():
        with raises(ConfigurationError) as exc_info:
            ServerConfig({"query": "Query"})  # type: ignore
        assert str(exc_info.value) == (
            "Expected {'query': 'Query'} to be a GraphQL schema."
        )

    def rejects_invalid_persisted_query_errors():
        with raises(ConfigurationError):
            ServerConfig(persisted_query_errors="ignore")  # type: ignore

    def describe_create():
        def creates_config_from_options():
            config = ServerConfig.create(schema=schema, debug=True)
            assert config.schema is schema
            assert config.debug == DebugFlag.ALL

        def rejects_unknown_options():
            with raises(ConfigurationError) as exc_info:
                ServerConfig.create(schema=schema, rootValue="root")
            assert str(exc_info.value) == (
                "Unknown server config option: 'rootValue'."
            )

    def has_a_representation():
        representation = repr(ServerConfig(validation_rules=[]))
        assert representation.startswith("<ServerConfig debug=")
        assert " validation_rules=StaticRules(())" in representation
        assert representation.endswith(
            " persisted_query_loader=NoPersistedQueryLoader()>"
        )


def describe_debug_flags():
    @mark.parametrize("value", [None, False, 0])
    def coerces_false_values(value):
        assert debug_flags(value) == DebugFlag.NONE

    def coerces_true():
        assert debug_flags(True) == DebugFlag.ALL
        assert DebugFlag.ALL & DebugFlag.INCLUDE_DEBUG_MESSAGE
        assert DebugFlag.ALL & DebugFlag.INCLUDE_TRACE
        assert DebugFlag.ALL & DebugFlag.CAPTURE_WARNINGS
        assert not DebugFlag.ALL & DebugFlag.RETHROW_INTERNAL_EXCEPTIONS

    def keeps_flags():
        flags = DebugFlag.INCLUDE_TRACE | DebugFlag.RETHROW_INTERNAL_EXCEPTIONS
        assert debug_flags(flags) == flags
        assert debug_flags(int(flags)) == flags

    def rejects_other_values():
        with raises(ConfigurationError) as exc_info:
            debug_flags("yes")  # type: ignore
        assert str(exc_info.value) == (
            "Expected debug to be a bool or DebugFlag, but got: 'yes'."
        )

    @mark.parametrize("value", [16, 1024, -1, -8])
    def rejects_undefined_flags(value):
        with raises(ConfigurationError) as exc_info:
            debug_flags(value)
        assert str(exc_info.value) == (
            f"Expected debug to be a bool or DebugFlag, but got: {value}."
        )
