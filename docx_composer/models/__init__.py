"""
Models module for the document composite.

Sections hold body elements and header/footer variants; every element
carries the address of the document part it is written to.
"""

from .base import Models
from .container import AbstractContainer
from .text import Text, TextBreak, PreserveText
from .page_break import PageBreak
from .title import Title
from .table import Table, TableRow, TableCell
from .toc import TOC
from .header_footer import HeaderFooter, HeaderFooterType, Header, Footer
from .section import Section

__all__ = [
    "Models",
    "AbstractContainer",
    "Text",
    "TextBreak",
    "PreserveText",
    "PageBreak",
    "Title",
    "Table",
    "TableRow",
    "TableCell",
    "TOC",
    "HeaderFooter",
    "HeaderFooterType",
    "Header",
    "Footer",
    "Section",
]
