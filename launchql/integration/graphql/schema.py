import os.path
from typing import Optional, Union

import graphql

# Load GraphQL definitions from the file
pwd = os.path.dirname(__file__)

# Get this schema
with open(os.path.join(pwd, './schema.graphql'), 'rt') as f:
    graphql_launchql_schema = f.read()


def resolves(schema: graphql.GraphQLSchema, type_name: str, field_name: Optional[str]):
    """ Bind a resolver to a field

    Example:
        @resolves(schema, 'Query', 'launches')
        async def resolve_launches(root, info: graphql.GraphQLResolveInfo, pageSize: int = None, after: str = None):
            ...
    """
    # Get the type
    type: Union[graphql.GraphQLObjectType, graphql.GraphQLInputObjectType] = schema.type_map[type_name]  # type: ignore[assignment]

    # Get the field (if provided)
    target: Union[graphql.GraphQLObjectType, graphql.GraphQLInputObjectType, graphql.GraphQLField]
    if not field_name:
        target = type
    else:
        target = type.fields[field_name]

    # Bind the resolver
    def decorator(func):
        target.resolve = func  # type: ignore[union-attr]
        return func
    return decorator
