"""Container model shared by sections, headers, footers and table cells."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type

from lxml import etree

from ..exceptions import ValidationError
from .base import Models, PartId

logger = logging.getLogger(__name__)


class AbstractContainer(Models):
    """Ordered sequence of child elements bound to one document part."""

    def __init__(self) -> None:
        super().__init__()
        self.children: List[Models] = []

    # ------------------------------------------------------------------
    def _allowed_types(self) -> Tuple[Type[Models], ...]:
        from .table import Table
        from .text import Text, TextBreak

        return (Text, TextBreak, Table)

    def add_element(self, element: Models) -> Models:
        """
        Append ``element`` to this container.

        The element inherits the container's document part address and
        document reference.

        Raises:
            ValidationError: If the element type is not allowed here
        """
        if not isinstance(element, Models):
            raise ValidationError("Container can only hold Models instances", type(element).__name__)
        if not isinstance(element, self._allowed_types()):
            allowed = ", ".join(t.__name__ for t in self._allowed_types())
            raise ValidationError(
                f"{type(element).__name__} is not allowed in {type(self).__name__}",
                f"allowed: {allowed}",
            )

        element.set_doc_part(self.get_doc_part(), self.get_doc_part_id())
        element.set_document(self.document)
        element.parent = self
        element.element_index = len(self.children) + 1
        self.children.append(element)

        logger.debug(
            f"{type(element).__name__} added to {self.doc_part}:{self.doc_part_id} "
            f"at position {element.element_index}"
        )
        return element

    # ------------------------------------------------------------------
    def add_text(self, text: str, font_style: Any = None, paragraph_style: Any = None) -> Models:
        from .text import Text

        return self.add_element(Text(text, font_style, paragraph_style))

    def add_text_break(self, count: int = 1, font_style: Any = None,
                       paragraph_style: Any = None) -> List[Models]:
        """Add ``count`` text breaks, one element each."""
        from .text import TextBreak

        return [self.add_element(TextBreak(font_style, paragraph_style)) for _ in range(count)]

    def add_table(self, style: Any = None) -> Models:
        from .table import Table

        table = Table(self.get_doc_part(), self.get_doc_part_id(), style)
        return self.add_element(table)

    # ------------------------------------------------------------------
    def set_doc_part(self, doc_part: str, doc_part_id: PartId = 1) -> None:
        super().set_doc_part(doc_part, doc_part_id)
        for child in self.children:
            child.set_doc_part(doc_part, doc_part_id)

    def set_document(self, document: Optional[Any]) -> None:
        super().set_document(document)
        for child in self.children:
            child.set_document(document)

    def get_elements(self) -> List[Models]:
        """Get child elements in insertion order."""
        return list(self.children)

    def count_elements(self) -> int:
        return len(self.children)

    def iter_children(self, type_filter: Optional[Type[Models]] = None) -> Iterator[Models]:
        """Iterate over children, optionally filtered by type."""
        for child in self.children:
            if type_filter is None or isinstance(child, type_filter):
                yield child

    def find_by_id(self, target_id: str) -> Optional[Models]:
        """Find a model by ID in this container and its descendants."""
        for model in self.flatten():
            if model.id == target_id:
                return model
        return None

    def flatten(self) -> List[Models]:
        result: List[Models] = [self]
        for child in self.children:
            result.extend(child.flatten())
        return result

    def get_text(self) -> str:
        return "\n".join(text for text in (child.get_text() for child in self.children) if text)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['children'] = [child.to_dict() for child in self.children]
        return result

    def to_xml(self) -> etree._Element:
        element = super().to_xml()
        for child in self.children:
            element.append(child.to_xml())
        return element

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(part={self.doc_part}:{self.doc_part_id}, "
                f"children={len(self.children)})")
