"""
Header and footer models.

A section owns up to one header (and one footer) per placement type, but
nothing forbids adding more; each variant is numbered from 1 within its
section and kind.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from ..exceptions import ValidationError
from .container import AbstractContainer

logger = logging.getLogger(__name__)


class HeaderFooterType(str, Enum):
    """Placement of a header or footer variant."""
    AUTO = "default"
    FIRST = "first"
    EVEN = "even"

    @classmethod
    def from_value(cls, value: Any) -> 'HeaderFooterType':
        """
        Resolve an enum member or its string value.

        Raises:
            ValidationError: If the value is not a known placement type
        """
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValidationError("Invalid header/footer type", f"{value!r}, expected one of {allowed}") from None


class HeaderFooter(AbstractContainer):
    """
    Base of header and footer variants.

    Args:
        section_id: ID of the owning section
        index: 1-based position among the section's variants of this kind
        header_type: Placement type
        document: Owning document, if any
    """

    AUTO = HeaderFooterType.AUTO
    FIRST = HeaderFooterType.FIRST
    EVEN = HeaderFooterType.EVEN

    container_kind = ""

    def __init__(self, section_id: int, index: int = 1, header_type: Any = HeaderFooterType.AUTO,
                 document: Optional[Any] = None):
        super().__init__()
        self.section_id = section_id
        self.index = index
        self.type = HeaderFooterType.from_value(header_type)
        self.set_doc_part(self.container_kind, (section_id, index))
        self.set_document(document)

        logger.debug(f"{self.__class__.__name__} {index} ({self.type.value}) created for section {section_id}")

    def _allowed_types(self):
        from .table import Table
        from .text import PreserveText, Text, TextBreak

        return (Text, TextBreak, PreserveText, Table)

    def add_preserve_text(self, text: str, font_style: Any = None, paragraph_style: Any = None):
        from .text import PreserveText

        return self.add_element(PreserveText(text, font_style, paragraph_style))

    def get_type(self) -> HeaderFooterType:
        return self.type

    def get_section_id(self) -> int:
        return self.section_id

    def get_index(self) -> int:
        return self.index

    def get_part_number(self) -> int:
        """
        Legacy part number, three slots per section.

        Only unique while a section has at most three variants of a kind;
        the document part address is unique in every case.
        """
        return (self.section_id - 1) * 3 + self.index

    def get_attributes(self) -> Dict[str, Any]:
        return {
            'section_id': self.section_id,
            'index': self.index,
            'type': self.type.value,
            'part_number': self.get_part_number(),
        }


class Header(HeaderFooter):
    """Header variant of a section."""

    container_kind = "header"


class Footer(HeaderFooter):
    """Footer variant of a section."""

    container_kind = "footer"
