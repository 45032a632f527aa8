""" Cursor-based pagination

Launches are paginated backwards in time. Every launch has an opaque cursor;
give the cursor of the last launch you've seen as `after` to get the next page.
"""

from .cursor import paginate, PageRequest, PageResult, empty_page
from .page import page_response, LaunchConnectionDict
