"""GraphQL Server Helper

The :mod:`graphql_server_helper` package takes care of everything a GraphQL server
needs to do between receiving the parameters of an operation from a client and
sending back the result: It obtains the document by parsing the query or by
loading a persisted query, validates the document with a configurable set of
rules, executes it and formats the result, with optional debugging information.

The parser, validator and executor are provided by GraphQL-core.
"""

# The GraphQL Server Helper version info.
from .version import version, version_info

# Errors
from .error import ClientSafeError, ConfigurationError, RequestError

# Debugging
from .debug import DebugFlag
from .diagnostics import DiagnosticRecord, DiagnosticSink

# Operation parameters
from .operation_params import OperationParams, validate_operation_params

# Validation policies
from .validation_policy import (
    SKIP_VALIDATION,
    DefaultRules,
    DynamicRules,
    StaticRules,
    ValidationPolicy,
)

# Persisted queries
from .persisted_queries import (
    CallableQueryLoader,
    MappingQueryLoader,
    NoPersistedQueryLoader,
    PersistedQueryErrors,
    PersistedQueryLoader,
)

# Server configuration
from .server_config import ServerConfig

# Results
from .result import OperationResult, format_error

# Execution
from .helper import Helper, execute_operation

# The GraphQL Server Helper version info.
__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "__version__",
    "__version_info__",
    "ClientSafeError",
    "ConfigurationError",
    "RequestError",
    "DebugFlag",
    "DiagnosticRecord",
    "DiagnosticSink",
    "OperationParams",
    "validate_operation_params",
    "SKIP_VALIDATION",
    "DefaultRules",
    "DynamicRules",
    "StaticRules",
    "ValidationPolicy",
    "CallableQueryLoader",
    "MappingQueryLoader",
    "NoPersistedQueryLoader",
    "PersistedQueryErrors",
    "PersistedQueryLoader",
    "ServerConfig",
    "OperationResult",
    "format_error",
    "Helper",
    "execute_operation",
]
