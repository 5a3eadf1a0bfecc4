"""
Table model for generated documents.

Rows and cells are created through the table and inherit its document
part address, so a table placed in a footer keeps all of its cell
content in that footer's part.
"""

from typing import Any, Dict, List, Optional, Tuple

from lxml import etree

from .base import Models, PartId
from .container import AbstractContainer


class Table(Models):
    """
    Represents a table with rows and cells.

    Args:
        doc_part: Part kind of the owning container
        doc_part_id: Part number of the owning container
        style: Table style name or style object
    """

    def __init__(self, doc_part: str = "section", doc_part_id: PartId = 1, style: Any = None):
        super().__init__()
        self.rows: List['TableRow'] = []
        self.set_doc_part(doc_part, doc_part_id)
        self.style = style
        self.width: Optional[int] = None

    def add_row(self, height: Optional[int] = None, style: Any = None) -> 'TableRow':
        row = TableRow(self.doc_part, self.doc_part_id, height, style)
        row.set_document(self.document)
        row.parent = self
        self.rows.append(row)
        return row

    def get_rows(self) -> List['TableRow']:
        return list(self.rows)

    def get_cell(self, row_index: int, col_index: int) -> Optional['TableCell']:
        """Get cell at 0-based coordinates, None when out of range."""
        if 0 <= row_index < len(self.rows):
            cells = self.rows[row_index].cells
            if 0 <= col_index < len(cells):
                return cells[col_index]
        return None

    def count_columns(self) -> int:
        """Widest row determines the column count."""
        return max((len(row.cells) for row in self.rows), default=0)

    def get_dimensions(self) -> Tuple[int, int]:
        return (len(self.rows), self.count_columns())

    def set_width(self, width: int) -> None:
        self.width = width

    # ------------------------------------------------------------------
    def set_doc_part(self, doc_part: str, doc_part_id: PartId = 1) -> None:
        super().set_doc_part(doc_part, doc_part_id)
        for row in self.rows:
            row.set_doc_part(doc_part, doc_part_id)

    def set_document(self, document: Optional[Any]) -> None:
        super().set_document(document)
        for row in self.rows:
            row.set_document(document)

    def flatten(self) -> List[Models]:
        result: List[Models] = [self]
        for row in self.rows:
            result.extend(row.flatten())
        return result

    def get_text(self) -> str:
        return "\n".join(row.get_text() for row in self.rows)

    def get_attributes(self) -> Dict[str, Any]:
        return {'style': self.style, 'width': self.width}

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['rows'] = [row.to_dict() for row in self.rows]
        return result

    def to_xml(self) -> etree._Element:
        element = super().to_xml()
        for row in self.rows:
            element.append(row.to_xml())
        return element


class TableRow(Models):
    """Represents a table row."""

    def __init__(self, doc_part: str = "section", doc_part_id: PartId = 1,
                 height: Optional[int] = None, style: Any = None):
        super().__init__()
        self.cells: List['TableCell'] = []
        self.set_doc_part(doc_part, doc_part_id)
        self.height = height
        self.style = style

    def add_cell(self, width: Optional[int] = None, style: Any = None) -> 'TableCell':
        cell = TableCell(self.doc_part, self.doc_part_id, width, style)
        cell.set_document(self.document)
        cell.parent = self
        cell.element_index = len(self.cells) + 1
        self.cells.append(cell)
        return cell

    def get_cells(self) -> List['TableCell']:
        return list(self.cells)

    def set_doc_part(self, doc_part: str, doc_part_id: PartId = 1) -> None:
        super().set_doc_part(doc_part, doc_part_id)
        for cell in self.cells:
            cell.set_doc_part(doc_part, doc_part_id)

    def set_document(self, document: Optional[Any]) -> None:
        super().set_document(document)
        for cell in self.cells:
            cell.set_document(document)

    def flatten(self) -> List[Models]:
        result: List[Models] = [self]
        for cell in self.cells:
            result.extend(cell.flatten())
        return result

    def get_text(self) -> str:
        return "\t".join(cell.get_text() for cell in self.cells)

    def get_attributes(self) -> Dict[str, Any]:
        return {'height': self.height, 'style': self.style}

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['cells'] = [cell.to_dict() for cell in self.cells]
        return result

    def to_xml(self) -> etree._Element:
        element = super().to_xml()
        for cell in self.cells:
            element.append(cell.to_xml())
        return element


class TableCell(AbstractContainer):
    """Represents a table cell; holds text, breaks and nested tables."""

    def __init__(self, doc_part: str = "section", doc_part_id: PartId = 1,
                 width: Optional[int] = None, style: Any = None):
        super().__init__()
        self.set_doc_part(doc_part, doc_part_id)
        self.width = width
        self.style = style

    def _allowed_types(self):
        from .text import PreserveText, Text, TextBreak

        if self.doc_part in ("header", "footer"):
            return (Text, TextBreak, PreserveText, Table)
        return (Text, TextBreak, Table)

    def get_attributes(self) -> Dict[str, Any]:
        return {'width': self.width, 'style': self.style}
