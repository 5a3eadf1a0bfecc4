"""
Title (heading) element.

Titles registered with a document receive a bookmark ID that links them
to table-of-contents entries.
"""

import logging
from typing import Any, Dict, Optional

from ..exceptions import ValidationError
from .base import Models

logger = logging.getLogger(__name__)


class Title(Models):
    """
    Represents a heading of a given depth.

    Args:
        text: Heading text
        depth: Heading level, 1 for the top level
        style: Paragraph style name, ``Heading<depth>`` when omitted
    """

    def __init__(self, text: str = "", depth: int = 1, style: Optional[str] = None):
        super().__init__()
        self.text = "" if text is None else str(text)
        self.depth = depth
        self.style = style or f"Heading{depth}"
        self.bookmark_id: Optional[int] = None

    def set_bookmark_id(self, bookmark_id: int) -> None:
        """
        Assign the bookmark ID handed out by the document.

        Raises:
            ValidationError: If the title already has a bookmark ID
        """
        if self.bookmark_id is not None:
            raise ValidationError("Title already has a bookmark ID", str(self.bookmark_id))
        self.bookmark_id = bookmark_id
        logger.debug(f"Title '{self.text}' bound to bookmark {bookmark_id}")

    def get_bookmark_id(self) -> Optional[int]:
        return self.bookmark_id

    def get_anchor(self) -> Optional[str]:
        """Bookmark name used by TOC hyperlinks, None when unregistered."""
        if self.bookmark_id is None:
            return None
        return f"_Toc{self.bookmark_id}"

    def get_depth(self) -> int:
        return self.depth

    def get_text(self) -> str:
        return self.text

    def get_attributes(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'depth': self.depth,
            'style': self.style,
            'bookmark_id': self.bookmark_id,
        }
