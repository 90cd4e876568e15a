"""Schema used for testing the server helper

Using our shorthand to describe type systems, the schema is::

    type Query {
      f1: String
      fieldWithWarnings: String
      fieldWithException: String
      fieldWithSafeException: String
      nonNullFieldWithException: String!
      testContextAndRootValue: String
      fieldWithArg(arg: String!): String
    }

    type Mutation {
      m1: String
    }

All resolvers that do not fail return the name of the field.
"""

from warnings import warn

from graphql.type import (
    GraphQLArgument,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from graphql_server_helper import ClientSafeError

__all__ = ["server_schema"]


def resolve_field_name(_root, info):
    return info.field_name


def resolve_field_with_warnings(_root, info):
    warn("deprecated", DeprecationWarning)
    warn("notice", UserWarning)
    warn("warning", RuntimeWarning)
    return info.field_name


def resolve_field_with_exception(_root, _info):
    raise Exception("This is the exception we want")


def resolve_field_with_safe_exception(_root, _info):
    raise ClientSafeError("This is safe to show")


def resolve_test_context_and_root_value(root, info):
    info.context.tested_root_value = root
    return info.field_name


def resolve_field_with_arg(_root, _info, arg):
    return arg


query_type = GraphQLObjectType(
    "Query",
    lambda: {
        "f1": GraphQLField(GraphQLString, resolve=resolve_field_name),
        "fieldWithWarnings": GraphQLField(
            GraphQLString, resolve=resolve_field_with_warnings
        ),
        "fieldWithException": GraphQLField(
            GraphQLString, resolve=resolve_field_with_exception
        ),
        "fieldWithSafeException": GraphQLField(
            GraphQLString, resolve=resolve_field_with_safe_exception
        ),
        "nonNullFieldWithException": GraphQLField(
            GraphQLNonNull(GraphQLString), resolve=resolve_field_with_exception
        ),
        "testContextAndRootValue": GraphQLField(
            GraphQLString, resolve=resolve_test_context_and_root_value
        ),
        "fieldWithArg": GraphQLField(
            GraphQLString,
            args={"arg": GraphQLArgument(GraphQLNonNull(GraphQLString))},
            resolve=resolve_field_with_arg,
        ),
    },
)

mutation_type = GraphQLObjectType(
    "Mutation", {"m1": GraphQLField(GraphQLString, resolve=resolve_field_name)}
)

server_schema = GraphQLSchema(query_type, mutation_type)
