from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from launchql.settings import Settings
from launchql.typing import UserDict
from launchql.datasources import DataSources


@dataclass
class Context:
    """ GraphQL context: everything a resolver may need """
    # Data sources: the launch catalog and the store
    data_sources: DataSources

    # The current user, if any. Resolvers only look at `user['email']` and `user['id']`
    user: Optional[UserDict] = None

    # Service settings
    settings: Settings = field(default_factory=Settings)
