""" Making queries with GraphQL """
from __future__ import annotations

import asyncio
from typing import Any

import graphql


async def graphql_query(schema: graphql.GraphQLSchema, query: str, context_value: Any = None, **variable_values):
    """ Make a GraphQL query, quick. Fail on errors.

    Runs in the current event loop: the one that the data sources were created in.

    Example:
        res = await graphql_query(schema, 'query { launches { hasMore } }', context)
    """
    res = await graphql.graphql(schema, query, variable_values=variable_values, context_value=context_value)

    # Raise errors as exceptions. Useful in unit-tests.
    if res.errors:
        # On error? raise it as it is
        if len(res.errors) == 1:
            raise res.errors[0]
        # Many errors? Raise as a list
        else:
            raise RuntimeError(res.errors)

    return res.data


def graphql_query_sync(schema: graphql.GraphQLSchema, query: str, context_value: Any = None, **variable_values):
    """ Make a GraphQL query from synchronous code. Fail on errors.

    Every call runs in a new event loop. Only use it with data sources that are not bound
    to a loop, e.g. mocks: a database engine or an HTTP client would outlive their loop.
    """
    return asyncio.run(graphql_query(schema, query, context_value, **variable_values))
