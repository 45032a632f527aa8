from importlib.metadata import version as _version
__version__ = _version('launchql')

from .settings import Settings
from .pager import paginate, page_response, PageRequest, PageResult
from .mutations import Ok, Fail

from . import exc
