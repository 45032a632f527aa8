""" The result envelope for a page of launches """

from __future__ import annotations

from typing import TypedDict, Optional

from launchql.typing import LaunchDict
from .cursor import PageResult


def page_response(result: PageResult) -> LaunchConnectionDict:
    """ Format a page for the `LaunchConnection` GraphQL type """
    return {
        'cursor': result.cursor,
        'hasMore': result.has_more,
        'launches': list(result.launches),
    }


class LaunchConnectionDict(TypedDict):
    """ A page of launches: the `LaunchConnection` GraphQL type """
    cursor: Optional[str]
    hasMore: bool
    launches: list[LaunchDict]
