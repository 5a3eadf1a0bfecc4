"""Page break element."""

from .base import Models


class PageBreak(Models):
    """Stateless marker forcing a new page."""

    pass
