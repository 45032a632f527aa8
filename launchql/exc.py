
class BaseLaunchqlException(Exception):
    pass


class LaunchCatalogError(BaseLaunchqlException):
    """ The launch catalog could not be reached, or has returned an error

    Reported when the HTTP request to the launch API fails
    """

    def __init__(self, url: str, err: str):
        self.url = url
        super().__init__(f'Launch catalog error at {url}: {err}')


class NotAuthenticatedError(BaseLaunchqlException):
    """ An operation requires a user, but there is none

    Reported by the store when trips are booked or cancelled anonymously
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f'You must be logged in to {operation}')
