from __future__ import annotations

import logging
from collections import abc
from dataclasses import dataclass
from typing import Optional, NamedTuple

from launchql.settings import Settings
from launchql.typing import LaunchDict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageRequest:
    """ Pagination parameters: which page of launches to get """
    # The number of launches per page
    page_size: int = 20

    # Cursor of the launch to start after. `None` means: start from the most recent one
    after: Optional[str] = None

    @classmethod
    def from_arguments(cls, page_size: Optional[int] = None, after: Optional[str] = None, settings: Optional[Settings] = None) -> PageRequest:
        """ Make a request from raw query arguments: apply the default page size, never go negative """
        settings = settings or Settings()
        return cls(page_size=settings.get_page_size(page_size), after=after)


class PageResult(NamedTuple):
    """ A page of launches, with the cursor to continue from """
    # Launches on this page, most recent first
    launches: list[LaunchDict]

    # Cursor of the last launch on this page; `None` if the page is empty
    cursor: Optional[str]

    # Are there any launches beyond this page?
    has_more: bool


def empty_page() -> PageResult:
    """ A page with nothing on it. A new one every time: callers may modify its list """
    return PageResult(launches=[], cursor=None, has_more=False)


def paginate(records: abc.Sequence[LaunchDict], request: PageRequest) -> PageResult:
    """ Cut a page out of the full list of launches

    The catalog lists launches in chronological order, but pages go backwards in time:
    the most recent launch comes first.

    Example:
        paginate([{'id': 1, 'cursor': 'a'}, {'id': 2, 'cursor': 'b'}], PageRequest(page_size=1))
        #-> PageResult(launches=[{'id': 2, 'cursor': 'b'}], cursor='b', has_more=True)

    Never fails: a cursor that is not found makes it start from the beginning.
    """
    page_size = max(request.page_size, 0)

    # Nothing to paginate
    if not records or page_size == 0:
        return empty_page()

    # Most recent first
    launches = list(reversed(records))

    # Find where to start
    start = _find_start(launches, request.after)

    # Cut the page
    page = launches[start:start + page_size]
    if not page:
        return empty_page()

    return PageResult(
        launches=page,
        cursor=page[-1].get('cursor'),
        has_more=start + page_size < len(launches),
    )


def _find_start(launches: list[LaunchDict], after: Optional[str]) -> int:
    """ Get the index of the launch that follows the `after` cursor """
    if after is None:
        return 0

    for i, launch in enumerate(launches):
        if launch.get('cursor') == after:
            return i + 1

    # Cursor not found. Start over.
    logger.debug(f'Cursor {after!r} not found among {len(launches)} launches; starting from the most recent')
    return 0
