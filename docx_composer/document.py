"""
Document registry.

Creates sections with sequential IDs and hands out bookmark IDs to the
titles added to them.
"""

import logging
import warnings
from typing import Any, Dict, List, Mapping, Optional

from .models.section import Section
from .models.title import Title

logger = logging.getLogger(__name__)


class Document:
    """Root of a generated document: its sections and registered titles."""

    def __init__(self):
        self.sections: List[Section] = []
        self.titles: Dict[int, Title] = {}

        logger.debug("Document initialized")

    # ------------------------------------------------------------------
    def add_section(self, settings: Optional[Mapping[str, Any]] = None) -> Section:
        """
        Add a new section.

        Args:
            settings: Optional setting overrides for the section

        Returns:
            The new Section, numbered from 1
        """
        section = Section(len(self.sections) + 1, settings, document=self)
        self.sections.append(section)

        logger.debug(f"Section {section.section_id} added to document")
        return section

    def get_sections(self) -> List[Section]:
        return list(self.sections)

    def get_section(self, section_id: int) -> Optional[Section]:
        """Get section by its 1-based ID."""
        if 1 <= section_id <= len(self.sections):
            return self.sections[section_id - 1]
        return None

    def count_sections(self) -> int:
        return len(self.sections)

    # ------------------------------------------------------------------
    def register_title(self, title: Title) -> int:
        """
        Register a title and return its bookmark ID.

        IDs start at 1 and increase with every registered title.
        """
        bookmark_id = len(self.titles) + 1
        self.titles[bookmark_id] = title

        logger.debug(f"Title '{title.text}' registered with bookmark {bookmark_id}")
        return bookmark_id

    def get_titles(self) -> List[Title]:
        """Registered titles in bookmark order."""
        return [self.titles[bookmark_id] for bookmark_id in sorted(self.titles)]

    # ------------------------------------------------------------------
    def create_section(self, settings: Optional[Mapping[str, Any]] = None) -> Section:
        """Deprecated alias of ``add_section``."""
        warnings.warn("create_section() is deprecated, use add_section()", DeprecationWarning, stacklevel=2)
        return self.add_section(settings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sections': [section.to_dict() for section in self.sections],
            'titles': {bookmark_id: title.text for bookmark_id, title in self.titles.items()},
        }

    def __repr__(self) -> str:
        return f"Document(sections={len(self.sections)}, titles={len(self.titles)})"
