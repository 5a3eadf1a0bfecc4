"""
Section model for generated documents.

A section is one region of the document with its own page settings,
header and footer variants, and an ordered list of body elements.
"""

import logging
import warnings
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..styles.section_settings import SectionSettings
from .container import AbstractContainer
from .header_footer import Footer, Header, HeaderFooter, HeaderFooterType
from .page_break import PageBreak
from .title import Title
from .toc import TOC

logger = logging.getLogger(__name__)


class Section(AbstractContainer):
    """
    Represents a section in the document.

    Args:
        section_id: Section number, assigned by the document
        settings: Optional setting overrides, ``None`` values are ignored
        document: Owning document, if any
    """

    def __init__(self, section_id: int, settings: Optional[Mapping[str, Any]] = None,
                 document: Optional[Any] = None):
        super().__init__()
        self.section_id = section_id
        self.headers: Dict[int, Header] = {}
        self.footers: Dict[int, Footer] = {}
        self.set_doc_part("section", section_id)
        self.set_document(document)
        self.settings = SectionSettings()
        self.set_settings(settings)

        logger.debug(f"Section {section_id} initialized")

    # ------------------------------------------------------------------
    def _allowed_types(self):
        from .table import Table
        from .text import Text, TextBreak

        return (Text, TextBreak, PageBreak, Title, Table, TOC)

    def get_section_id(self) -> int:
        return self.section_id

    def set_settings(self, settings: Optional[Mapping[str, Any]] = None) -> None:
        """
        Merge setting overrides into the section settings.

        Keys with a ``None`` value keep their current value. Unknown keys
        are rejected by the settings object.

        Args:
            settings: Mapping of setting name to value
        """
        self.settings.apply(settings)

    def get_settings(self) -> SectionSettings:
        return self.settings

    # ------------------------------------------------------------------
    def add_title(self, text: str, depth: int = 1) -> Title:
        """
        Add a title.

        When the section belongs to a document the title is registered
        there and receives its bookmark ID before being appended.

        Args:
            text: Heading text
            depth: Heading level

        Returns:
            The new Title
        """
        title = Title(text, depth)
        title.set_doc_part(self.get_doc_part(), self.get_doc_part_id())
        if self.document is not None:
            title.set_bookmark_id(self.document.register_title(title))
        self.add_element(title)
        return title

    def add_page_break(self) -> PageBreak:
        return self.add_element(PageBreak())

    def add_toc(self, font_style: Any = None, toc_style: Any = None,
                min_depth: int = 1, max_depth: int = 9) -> TOC:
        """
        Add a table of contents.

        Depth bounds are stored as given; the titles listed are resolved
        from the document when the TOC is written.
        """
        return self.add_element(TOC(font_style, toc_style, min_depth, max_depth))

    # ------------------------------------------------------------------
    def add_header(self, header_type: Union[HeaderFooterType, str] = HeaderFooterType.AUTO) -> Header:
        return self._add_header_footer(header_type, True)

    def add_footer(self, footer_type: Union[HeaderFooterType, str] = HeaderFooterType.AUTO) -> Footer:
        return self._add_header_footer(footer_type, False)

    def get_headers(self) -> Mapping[int, Header]:
        """Read-only view of headers keyed by 1-based index."""
        return MappingProxyType(self.headers)

    def get_footers(self) -> Mapping[int, Footer]:
        """Read-only view of footers keyed by 1-based index."""
        return MappingProxyType(self.footers)

    def has_different_first_page(self) -> bool:
        """
        Is there a header for this section that is for the first page only?

        Returns:
            True if any header has type FIRST, False otherwise
        """
        return any(header.get_type() == HeaderFooterType.FIRST for header in self.headers.values())

    def _add_header_footer(self, header_type: Union[HeaderFooterType, str], is_header: bool) -> HeaderFooter:
        placement = HeaderFooterType.from_value(header_type)

        collection = self.headers if is_header else self.footers
        container_class = Header if is_header else Footer

        index = len(collection) + 1
        container = container_class(self.section_id, index, placement, document=self.document)
        collection[index] = container

        logger.debug(f"{container_class.__name__} {index} added to section {self.section_id}")
        return container

    # ------------------------------------------------------------------
    def create_header(self) -> Header:
        """Deprecated alias of ``add_header``."""
        warnings.warn("create_header() is deprecated, use add_header()", DeprecationWarning, stacklevel=2)
        return self.add_header()

    def create_footer(self) -> Footer:
        """Deprecated alias of ``add_footer``."""
        warnings.warn("create_footer() is deprecated, use add_footer()", DeprecationWarning, stacklevel=2)
        return self.add_footer()

    # ------------------------------------------------------------------
    def set_document(self, document: Optional[Any]) -> None:
        super().set_document(document)
        for variant in list(self.headers.values()) + list(self.footers.values()):
            variant.set_document(document)

    def get_attributes(self) -> Dict[str, Any]:
        return {
            'section_id': self.section_id,
            'different_first_page': self.has_different_first_page(),
        }

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['settings'] = self.settings.to_dict()
        result['headers'] = {index: header.to_dict() for index, header in self.headers.items()}
        result['footers'] = {index: footer.to_dict() for index, footer in self.footers.items()}
        return result

    def to_xml(self):
        element = super().to_xml()
        for variant in list(self.headers.values()) + list(self.footers.values()):
            element.append(variant.to_xml())
        return element
