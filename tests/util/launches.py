""" Launch data for tests """


def raw_launch(n: int, **fields) -> dict:
    """ Make a launch the way the REST API returns it

    Example:
        raw_launch(1)
        => {'flight_number': 1, 'launch_date_unix': 1000001, 'mission_name': 'mission-1', ...}
    """
    return {
        'flight_number': n,
        'launch_date_unix': 1_000_000 + n,
        'mission_name': f'mission-{n}',
        'launch_site': {'site_name': f'site-{n}'},
        'links': {
            'mission_patch_small': f'https://patch/{n}/small.png',
            'mission_patch': f'https://patch/{n}/large.png',
        },
        'rocket': {
            'rocket_id': f'rocket-{n}',
            'rocket_name': f'Rocket {n}',
            'rocket_type': 'FT',
        },
        **fields
    }


def launch(n: int, **fields) -> dict:
    """ Make a launch the way the catalog gives it: `launch_reducer(raw_launch(n))` """
    return {
        'id': n,
        'cursor': str(1_000_000 + n),
        'site': f'site-{n}',
        'mission': {
            'name': f'mission-{n}',
            'missionPatchSmall': f'https://patch/{n}/small.png',
            'missionPatchLarge': f'https://patch/{n}/large.png',
        },
        'rocket': {
            'id': f'rocket-{n}',
            'name': f'Rocket {n}',
            'type': 'FT',
        },
        **fields
    }
