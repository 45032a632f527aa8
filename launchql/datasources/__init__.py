""" Data sources: where launches, users and trips come from """

from __future__ import annotations

from dataclasses import dataclass

from launchql.settings import Settings
from .launch_api import LaunchAPI, launch_reducer
from .store import Store


@dataclass
class DataSources:
    """ All data sources, as given to resolvers """
    launch_api: LaunchAPI
    store: Store

    @classmethod
    def from_settings(cls, settings: Settings) -> DataSources:
        return cls(
            launch_api=LaunchAPI(settings),
            store=Store.from_settings(settings),
        )

    async def close(self):
        await self.launch_api.close()
        await self.store.close()
