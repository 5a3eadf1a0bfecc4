"""Table-of-contents placeholder element."""

from typing import Any, Dict, List

from .base import Models


class TOC(Models):
    """
    Table-of-contents placeholder.

    The entries are not stored here; ``get_titles`` resolves them from
    the attached document when the writer asks for them.

    Args:
        font_style: Font style of the entries
        toc_style: TOC style (tab leader, indent)
        min_depth: Lowest title depth listed
        max_depth: Highest title depth listed

    Depth bounds are stored as given and only compared when the
    titles are resolved.
    """

    def __init__(self, font_style: Any = None, toc_style: Any = None,
                 min_depth: int = 1, max_depth: int = 9):
        super().__init__()
        self.font_style = font_style
        self.toc_style = toc_style
        self.min_depth = min_depth
        self.max_depth = max_depth

    def get_min_depth(self) -> int:
        return self.min_depth

    def get_max_depth(self) -> int:
        return self.max_depth

    def get_titles(self) -> List[Any]:
        """Titles of the attached document within the depth bounds."""
        if self.document is None:
            return []
        return [
            title for title in self.document.get_titles()
            if self.min_depth <= title.depth <= self.max_depth
        ]

    def get_attributes(self) -> Dict[str, Any]:
        return {
            'font_style': self.font_style,
            'toc_style': self.toc_style,
            'min_depth': self.min_depth,
            'max_depth': self.max_depth,
        }
