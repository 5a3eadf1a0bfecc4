"""
DOCX Composer - in-memory model of generated word-processing documents.

The model is built section by section and handed to a writer:

- Document: section and bookmark registry
- Section: page settings, header/footer variants, body elements
- Header / Footer: per-section variants (default, first page, even pages)
- Elements: Title, Table, TOC, PageBreak, Text, TextBreak, PreserveText
"""

from .document import Document
from .exceptions import (
    DocxComposerError,
    ValidationError,
    ConfigurationError,
)
from .models import (
    Models,
    AbstractContainer,
    Section,
    Header,
    Footer,
    HeaderFooter,
    HeaderFooterType,
    Title,
    Table,
    TableRow,
    TableCell,
    TOC,
    PageBreak,
    Text,
    TextBreak,
    PreserveText,
)
from .styles import SectionSettings, Orientation, PageSize
from .utils.logger import configure_logging, get_logger, set_log_level

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocxComposerError",
    "ValidationError",
    "ConfigurationError",
    "Models",
    "AbstractContainer",
    "Section",
    "Header",
    "Footer",
    "HeaderFooter",
    "HeaderFooterType",
    "Title",
    "Table",
    "TableRow",
    "TableCell",
    "TOC",
    "PageBreak",
    "Text",
    "TextBreak",
    "PreserveText",
    "SectionSettings",
    "Orientation",
    "PageSize",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
