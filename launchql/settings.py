from __future__ import annotations

import os
import dataclasses
from collections import abc
from typing import Optional


@dataclasses.dataclass
class Settings:
    """ Settings for the launch booking service

    This object defines where the data comes from and how pages are cut.
    """
    # The `pageSize` you get by default, if not specified
    default_page_size: int = 20

    # Base URL of the launch catalog API
    launch_api_url: str = 'https://api.spacexdata.com/v2/'

    # SqlAlchemy URL of the database that keeps users and trips. Must name an async driver
    database_url: str = 'sqlite+aiosqlite://'

    # Timeout for launch catalog requests, seconds
    http_timeout: float = 30.0

    def __post_init__(self):
        # The catalog client resolves relative paths; make sure they resolve against the base, not its parent
        if not self.launch_api_url.endswith('/'):
            self.launch_api_url += '/'

    @classmethod
    def from_env(cls, environ: abc.Mapping[str, str] = os.environ, prefix: str = 'LAUNCHQL_') -> Settings:
        """ Load settings from environment variables, falling back to defaults

        Example:
            LAUNCHQL_DATABASE_URL=postgresql+asyncpg://localhost/launches
            LAUNCHQL_DEFAULT_PAGE_SIZE=10
        """
        def get(name: str) -> Optional[str]:
            return environ.get(prefix + name.upper())

        values: dict = {}
        for field in dataclasses.fields(cls):
            value = get(field.name)
            if value is None:
                continue

            # Convert: every field is either a str, an int, or a float
            if field.type in ('int', int):
                values[field.name] = int(value)
            elif field.type in ('float', float):
                values[field.name] = float(value)
            else:
                values[field.name] = value

        return cls(**values)

    # ### Callbacks for resolvers

    def get_page_size(self, page_size: Optional[int]) -> int:
        """ Callback that decides how many launches to put on a page

        Used by: PageRequest to apply the default page size.
        A negative page size is treated as zero: an empty page.
        """
        # Apply default page size
        if page_size is None:
            page_size = self.default_page_size

        # No negative pages
        return max(page_size, 0)
