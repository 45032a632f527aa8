""" Tools for testing """

from .graphql import graphql_query, graphql_query_sync
from .tables import created_tables, insert
