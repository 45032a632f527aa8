""" Integration with GraphQL: graphql-core """

# High-level APIs
from .resolvers import schema
from .context import Context

# Lower-level APIs
from .schema import graphql_launchql_schema, resolves
