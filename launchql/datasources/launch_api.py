""" Launch catalog: the SpaceX REST API """

from __future__ import annotations

import asyncio
import logging
from collections import abc
from typing import Optional

import httpx

from launchql import exc
from launchql.settings import Settings
from launchql.typing import LaunchDict

logger = logging.getLogger(__name__)


class LaunchAPI:
    """ Launch catalog backed by a REST API

    Example:
        async with LaunchAPI(Settings()) as api:
            launches = await api.get_all_launches()
    """

    def __init__(self, settings: Settings, *, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.client = client or httpx.AsyncClient(
            base_url=settings.launch_api_url,
            timeout=settings.http_timeout,
        )

    async def get_all_launches(self) -> list[LaunchDict]:
        """ Get every launch, in chronological order """
        response = await self._get('launches')
        return [launch_reducer(launch) for launch in response]

    async def get_launch_by_id(self, launch_id: int) -> Optional[LaunchDict]:
        """ Get one launch by its flight number, or `None` """
        response = await self._get('launches', params={'flight_number': launch_id})
        return launch_reducer(response[0]) if response else None

    async def get_launches_by_ids(self, launch_ids: abc.Iterable[int]) -> list[LaunchDict]:
        """ Get many launches by their flight numbers. Missing launches are skipped """
        launches = await asyncio.gather(*(
            self.get_launch_by_id(launch_id)
            for launch_id in launch_ids
        ))
        return [launch for launch in launches if launch is not None]

    async def _get(self, path: str, params: Optional[dict] = None) -> list[dict]:
        """ Make a GET request, return parsed JSON

        Raises:
            exc.LaunchCatalogError: network errors, HTTP errors, malformed JSON
        """
        logger.debug(f'GET {path} {params or ""}')
        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise exc.LaunchCatalogError(path, str(e)) from e
        except ValueError as e:
            raise exc.LaunchCatalogError(path, f'Malformed JSON: {e}') from e

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()


def launch_reducer(launch: dict) -> LaunchDict:
    """ Convert a launch from the REST API format into our format

    The launch date becomes the cursor: launches are ordered by it.
    """
    links = launch.get('links') or {}
    rocket = launch.get('rocket') or {}
    launch_site = launch.get('launch_site') or {}
    launch_date_unix = launch.get('launch_date_unix')

    return {
        'id': launch.get('flight_number'),
        'cursor': str(launch_date_unix) if launch_date_unix is not None else None,
        'site': launch_site.get('site_name'),
        'mission': {
            'name': launch.get('mission_name'),
            'missionPatchSmall': links.get('mission_patch_small'),
            'missionPatchLarge': links.get('mission_patch'),
        },
        'rocket': {
            'id': rocket.get('rocket_id'),
            'name': rocket.get('rocket_name'),
            'type': rocket.get('rocket_type'),
        },
    }
