""" Resolvers for the launch booking schema """

from __future__ import annotations

import logging
from typing import Optional

import graphql

from launchql.typing import LaunchDict, MissionDict, UserDict
from launchql.pager import paginate, page_response, PageRequest, LaunchConnectionDict
from launchql.mutations import Ok, aggregate_booking, aggregate_cancellation, aggregate_login
from launchql.mutations import mutation_response, MutationResponseDict
from .context import Context
from .schema import graphql_launchql_schema, resolves

logger = logging.getLogger(__name__)


# The executable schema. Resolvers below bind themselves to it
schema = graphql.build_schema(graphql_launchql_schema)


# ### Query

@resolves(schema, 'Query', 'launches')
async def resolve_launches(root, info: graphql.GraphQLResolveInfo, pageSize: Optional[int] = None, after: Optional[str] = None) -> LaunchConnectionDict:
    """ Get a page of launches, most recent first """
    context: Context = info.context
    all_launches = await context.data_sources.launch_api.get_all_launches()

    request = PageRequest.from_arguments(pageSize, after, context.settings)
    return page_response(paginate(all_launches, request))


@resolves(schema, 'Query', 'launch')
async def resolve_launch(root, info: graphql.GraphQLResolveInfo, id) -> Optional[LaunchDict]:
    context: Context = info.context
    launch_id = parse_id(id)
    if launch_id is None:
        return None

    return await context.data_sources.launch_api.get_launch_by_id(launch_id)


@resolves(schema, 'Query', 'me')
async def resolve_me(root, info: graphql.GraphQLResolveInfo) -> Optional[UserDict]:
    """ Get the current user, or nothing if not logged in """
    context: Context = info.context
    if not context.user or not context.user.get('email'):
        return None

    return await context.data_sources.store.find_or_create_user(where={'email': context.user['email']})


# ### Mutation

@resolves(schema, 'Mutation', 'bookTrips')
async def resolve_book_trips(root, info: graphql.GraphQLResolveInfo, launchIds: list) -> MutationResponseDict:
    context: Context = info.context

    # Ids that can't be launches are not booked
    launch_ids = [launch_id for launch_id in map(parse_id, launchIds) if launch_id is not None]
    if launch_ids:
        trips = await context.data_sources.store.book_trips(launch_ids=launch_ids, user=context.user)
    else:
        trips = []

    # Load launches that actually got booked
    if trips:
        launches = await context.data_sources.launch_api.get_launches_by_ids([trip['launchId'] for trip in trips])
    else:
        launches = []

    outcome = aggregate_booking(launchIds, trips, launches)
    logger.info(f'Booking {launchIds!r}: {outcome.message}')
    return mutation_response(outcome)


@resolves(schema, 'Mutation', 'cancelTrip')
async def resolve_cancel_trip(root, info: graphql.GraphQLResolveInfo, launchId) -> MutationResponseDict:
    context: Context = info.context

    cancelled = False
    launch: Optional[LaunchDict] = None

    launch_id = parse_id(launchId)
    if launch_id is not None:
        cancelled = await context.data_sources.store.cancel_trip(launch_id=launch_id, user=context.user)

        # Load the launch only if there's something to report
        if cancelled:
            launch = await context.data_sources.launch_api.get_launch_by_id(launch_id)

    outcome = aggregate_cancellation(cancelled, launch)
    logger.info(f'Cancelling {launchId!r}: {outcome.message}')
    return mutation_response(outcome)


@resolves(schema, 'Mutation', 'login')
async def resolve_login(root, info: graphql.GraphQLResolveInfo, email: Optional[str] = None) -> Optional[str]:
    """ Log in: get a token. Returns nothing if login failed """
    context: Context = info.context
    user = await context.data_sources.store.find_or_create_user(where={'email': email})

    outcome = aggregate_login(email, user)
    if isinstance(outcome, Ok):
        return outcome.data
    else:
        logger.warning(f'Login failed for {email!r}')
        return None


# ### Fields

@resolves(schema, 'Launch', 'isBooked')
async def resolve_launch_is_booked(launch: LaunchDict, info: graphql.GraphQLResolveInfo) -> bool:
    context: Context = info.context
    return await context.data_sources.store.is_booked_on_launch(launch_id=launch['id'], user=context.user)


@resolves(schema, 'User', 'trips')
async def resolve_user_trips(user: UserDict, info: graphql.GraphQLResolveInfo) -> list[LaunchDict]:
    """ Get launches the user is booked on """
    context: Context = info.context
    launch_ids = await context.data_sources.store.get_launch_ids_by_user(user=user)
    if not launch_ids:
        return []

    return await context.data_sources.launch_api.get_launches_by_ids(launch_ids)


@resolves(schema, 'Mission', 'missionPatch')
def resolve_mission_patch(mission: MissionDict, info: graphql.GraphQLResolveInfo, size: str = 'LARGE') -> Optional[str]:
    if size == 'SMALL':
        return mission['missionPatchSmall']
    else:
        return mission['missionPatchLarge']


def parse_id(value) -> Optional[int]:
    """ Convert a GraphQL `ID` into a launch id

    Launch ids are flight numbers. Anything that is not a number (or a null) gives `None`: no launch has such an id.
    """
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
