""" Reduce the outcome of a store write into a single verdict """

from __future__ import annotations

import base64
from collections import abc
from dataclasses import dataclass
from typing import Generic, TypeVar, TypedDict, Optional, Union

from launchql.typing import LaunchDict, TripDict, UserDict


# The payload of a successful outcome
T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """ Successful outcome, with data """
    data: T

    # Human-readable message
    message: str = ''

    success = True


@dataclass(frozen=True)
class Fail:
    """ Failed outcome, with an explanation """
    message: str

    success = False


# An outcome of a mutation
Outcome = Union[Ok[T], Fail]


def aggregate_booking(launch_ids: abc.Iterable[int], trips: abc.Sequence[TripDict], launches: list[LaunchDict]) -> Outcome[list[LaunchDict]]:
    """ Decide whether booking succeeded

    Args:
        launch_ids: The launches the user wanted to book
        trips: Trips that the store has actually booked
        launches: Launches of those trips, as resolved by the catalog
    """
    if trips:
        return Ok(launches, message='trips booked successfully')
    else:
        return Fail(f"the following launches couldn't be booked: {list(launch_ids)}")


def aggregate_cancellation(cancelled: bool, launch: Optional[LaunchDict]) -> Outcome[list[LaunchDict]]:
    """ Decide whether cancellation succeeded

    Args:
        cancelled: What the store has said
        launch: The launch whose trip was cancelled
    """
    if cancelled:
        return Ok([launch] if launch is not None else [], message='trip cancelled')
    else:
        return Fail('failed to cancel trip')


def aggregate_login(email: Optional[str], user: Optional[UserDict]) -> Outcome[str]:
    """ Decide whether login succeeded; give a token if it did

    The token is just the email encoded as base64. It is not a secret.
    """
    if user and email:
        return Ok(base64.b64encode(email.encode()).decode(), message='logged in')
    else:
        return Fail('login failed')


def mutation_response(outcome: Outcome[list[LaunchDict]]) -> MutationResponseDict:
    """ Format an outcome for the `TripUpdateResponse` GraphQL type """
    if isinstance(outcome, Ok):
        return {
            'success': True,
            'message': outcome.message,
            'launches': outcome.data,
        }
    else:
        return {
            'success': False,
            'message': outcome.message,
            'launches': [],
        }


class MutationResponseDict(TypedDict):
    """ The result of booking or cancellation: the `TripUpdateResponse` GraphQL type """
    success: bool
    message: str
    launches: list[LaunchDict]
