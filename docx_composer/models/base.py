"""
Base model class for document elements.

Every element knows the document part it belongs to (``doc_part`` and
``doc_part_id``), so a writer can route it to the main body stream or to
a specific header/footer stream.
"""

import re
import uuid
from typing import Any, Dict, List, Optional, Tuple, Union

from lxml import etree

# Sections use their number, header/footer variants a (section_id, index) pair
PartId = Union[int, Tuple[int, int]]

# Code points XML 1.0 cannot carry in attribute values
XML_INVALID_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def xml_safe(value: Any) -> str:
    """Render ``value`` as an XML attribute string, dropping invalid code points."""
    return XML_INVALID_CHARS.sub("", str(value))


class Models:
    """Base class for document models with part addressing helpers."""

    def __init__(self):
        """Initialize base model."""
        self.id: str = str(uuid.uuid4())
        self.parent: Optional['Models'] = None
        self.doc_part: str = "section"
        self.doc_part_id: PartId = 1
        self.element_index: Optional[int] = None  # 1-based position in the parent container
        self.document: Optional[Any] = None

    def set_doc_part(self, doc_part: str, doc_part_id: PartId = 1) -> None:
        """
        Stamp the document part address of this element.

        Args:
            doc_part: Part kind ("section", "header", "footer")
            doc_part_id: Section number, or (section_id, index) for variants
        """
        self.doc_part = doc_part
        self.doc_part_id = doc_part_id

    def get_doc_part(self) -> str:
        return self.doc_part

    def get_doc_part_id(self) -> PartId:
        return self.doc_part_id

    def get_doc_part_address(self) -> Tuple[str, PartId]:
        """Get ``(doc_part, doc_part_id)`` pair."""
        return (self.doc_part, self.doc_part_id)

    def set_document(self, document: Optional[Any]) -> None:
        self.document = document

    def get_document(self) -> Optional[Any]:
        return self.document

    def get_text(self) -> str:
        """Get text content from model."""
        return ""

    def get_attributes(self) -> Dict[str, Any]:
        """Element specific attributes used by ``to_dict`` and ``to_xml``."""
        return {}

    def flatten(self) -> List['Models']:
        """Flatten structure for traversal."""
        return [self]

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary."""
        return {
            'type': self.__class__.__name__,
            'id': self.id,
            'doc_part': self.doc_part,
            'doc_part_id': self.doc_part_id,
            'element_index': self.element_index,
            'attributes': self.get_attributes(),
        }

    def to_xml(self) -> etree._Element:
        """Convert model to an XML element for inspection."""
        element = etree.Element(self.__class__.__name__.lower())
        element.set('id', self.id)
        element.set('doc_part', self.doc_part)
        element.set('doc_part_id', xml_safe(self.doc_part_id))

        for name, value in self.get_attributes().items():
            if value is None or isinstance(value, (dict, list)):
                continue
            element.set(name, xml_safe(value.value if hasattr(value, 'value') else value))

        return element

    def __repr__(self) -> str:
        """String representation of model."""
        return f"{self.__class__.__name__}(id={self.id[:8]}..., part={self.doc_part}:{self.doc_part_id})"
