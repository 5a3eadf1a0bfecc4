"""Text elements: plain text, text breaks and preserved field text."""

import re
from typing import Any, Dict, List

from .base import Models

FIELD_PATTERN = re.compile(r"\{([^{}]+)\}")


class Text(Models):
    """A run of text with optional font and paragraph styles."""

    def __init__(self, text: str = "", font_style: Any = None, paragraph_style: Any = None):
        super().__init__()
        self.text = "" if text is None else str(text)
        self.font_style = font_style
        self.paragraph_style = paragraph_style

    def get_text(self) -> str:
        return self.text

    def get_attributes(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'font_style': self.font_style,
            'paragraph_style': self.paragraph_style,
        }


class PreserveText(Models):
    """
    Text whose ``{FIELD}`` markers are kept for the writer.

    Only headers and footers accept it; typical use is page numbering,
    e.g. ``"Page {PAGE} of {NUMPAGES}"``.
    """

    def __init__(self, text: str = "", font_style: Any = None, paragraph_style: Any = None):
        super().__init__()
        self.text = "" if text is None else str(text)
        self.font_style = font_style
        self.paragraph_style = paragraph_style

    def get_fields(self) -> List[str]:
        return FIELD_PATTERN.findall(self.text)

    def get_text(self) -> str:
        return self.text

    def get_attributes(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'fields': self.get_fields(),
            'font_style': self.font_style,
            'paragraph_style': self.paragraph_style,
        }


class TextBreak(Models):
    """A single line break."""

    def __init__(self, font_style: Any = None, paragraph_style: Any = None):
        super().__init__()
        self.font_style = font_style
        self.paragraph_style = paragraph_style

    def get_attributes(self) -> Dict[str, Any]:
        return {'font_style': self.font_style, 'paragraph_style': self.paragraph_style}
