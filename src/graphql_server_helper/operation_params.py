"""Operation parameters

Normalized representation of a single GraphQL request sent by a client.
"""

from json import JSONDecodeError, loads
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from graphql.pyutils import inspect

from .error import RequestError

__all__ = ["OperationParams", "validate_operation_params"]


_query_id_keys = ("queryId", "queryid", "id", "documentId")


class OperationParams(NamedTuple):
    """Parameters of one GraphQL operation requested by a client.

    Either ``query`` contains the text of the query document, or ``query_id``
    references a persisted query that is looked up by the server.
    """

    query: Optional[str] = None
    query_id: Optional[str] = None
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = None
    extensions: Optional[Dict[str, Any]] = None
    read_only: bool = False
    original_input: Optional[Mapping[str, Any]] = None

    @classmethod
    def create(
        cls, params: Mapping[str, Any], read_only: bool = False
    ) -> "OperationParams":
        """Create operation parameters from the given raw request parameters.

        Variables and extensions may be passed as JSON strings. Values that cannot
        be decoded are kept as they are, so that they can be reported when the
        parameters are validated.

        Set ``read_only`` if the request has been sent in a way that must not cause
        any side effects (e.g. via HTTP GET).
        """
        query_id = None
        for key in _query_id_keys:
            query_id = params.get(key)
            if query_id is not None:
                break
        return cls(
            query=params.get("query"),
            query_id=query_id,
            variables=_decode_json(params.get("variables")),
            operation_name=params.get("operationName"),
            extensions=_decode_json(params.get("extensions")),
            read_only=read_only,
            original_input=params,
        )


def _decode_json(value: Any) -> Any:
    if isinstance(value, str):
        if not value:
            return None
        try:
            return loads(value)
        except JSONDecodeError:
            pass
    return value


def validate_operation_params(params: OperationParams) -> List[RequestError]:
    """Check the given operation parameters for obvious mistakes.

    Returns a list of errors, or an empty list if the parameters are valid.
    """
    errors: List[RequestError] = []
    query, query_id = params.query, params.query_id
    if not query and not query_id:
        errors.append(
            RequestError(
                "GraphQL Request must include at least one of those two"
                ' parameters: "query" or "queryId"'
            )
        )
    if query and query_id:
        errors.append(
            RequestError(
                'GraphQL Request parameters "query" and "queryId"'
                " are mutually exclusive"
            )
        )
    if query is not None and not isinstance(query, str):
        errors.append(
            RequestError(
                'GraphQL Request parameter "query" must be string,'
                f" but got {inspect(query)}"
            )
        )
    if query_id is not None and not isinstance(query_id, str):
        errors.append(
            RequestError(
                'GraphQL Request parameter "queryId" must be string,'
                f" but got {inspect(query_id)}"
            )
        )
    variables = params.variables
    if variables is not None and not isinstance(variables, Mapping):
        errors.append(
            RequestError(
                'GraphQL Request parameter "variables" must be object'
                f" or JSON string parsed to object, but got {inspect(variables)}"
            )
        )
    operation_name = params.operation_name
    if operation_name is not None and not isinstance(operation_name, str):
        errors.append(
            RequestError(
                'GraphQL Request parameter "operationName" must be string,'
                f" but got {inspect(operation_name)}"
            )
        )
    return errors
