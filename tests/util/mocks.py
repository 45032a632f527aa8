""" Test doubles for data sources """

from types import SimpleNamespace
from typing import Optional
from unittest import mock

from launchql.datasources import DataSources, LaunchAPI, Store
from launchql.integration.graphql import Context
from launchql.typing import UserDict


def mock_context(user: Optional[UserDict] = None) -> Context:
    """ Make a Context with mock data sources

    Data source methods are AsyncMock-s: they mirror the real ones, which are coroutines.

    Example:
        context = mock_context(user={'id': 1, 'email': 'a@a.a', 'token': None})
        context.data_sources.launch_api.get_all_launches.return_value = [...]
    """
    return Context(
        data_sources=DataSources(
            launch_api=mock.Mock(spec=LaunchAPI),
            store=mock.Mock(spec=Store),
        ),
        user=user,
    )


def mock_info(context: Context):
    """ Make a GraphQLResolveInfo lookalike: resolvers only use `info.context` """
    return SimpleNamespace(context=context)
