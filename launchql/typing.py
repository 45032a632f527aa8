from __future__ import annotations

from typing import Optional, TypedDict


class MissionDict(TypedDict):
    """ Mission info of a launch """
    name: Optional[str]
    missionPatchSmall: Optional[str]
    missionPatchLarge: Optional[str]


class RocketDict(TypedDict):
    """ The rocket used for a launch """
    id: str
    name: Optional[str]
    type: Optional[str]


class LaunchDict(TypedDict, total=False):
    """ A launch, as provided by the launch catalog

    Only `id` and `cursor` are relevant for pagination, and `cursor` may be missing
    """
    id: int
    cursor: Optional[str]
    site: Optional[str]
    mission: MissionDict
    rocket: RocketDict


class UserDict(TypedDict):
    """ A user, as stored in the database """
    id: int
    email: str
    token: Optional[str]


class TripDict(TypedDict):
    """ A booked trip: a user on a launch """
    id: int
    launchId: int
    userId: int
