"""
Section settings for DOCX documents.

Holds page size, orientation, margins, columns, borders and numbering
options of one section. All lengths are expressed in twips (1/1440 inch).
"""

import copy
import logging
import re
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TWIPS_PER_MM = 1440 / 25.4


class Orientation(str, Enum):
    """Page orientation options."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PageSize(Enum):
    """Standard page sizes (portrait, mm)."""
    A4 = (210.0, 297.0)
    A3 = (297.0, 420.0)
    A5 = (148.0, 210.0)
    LETTER = (215.9, 279.4)
    LEGAL = (215.9, 355.6)

    def to_twips(self):
        width, height = self.value
        return mm_to_twips(width), mm_to_twips(height)


def mm_to_twips(value: float) -> int:
    return int(round(value * TWIPS_PER_MM))


BREAK_TYPES = ("continuous", "nextColumn", "nextPage", "evenPage", "oddPage")
BORDER_SIDES = ("top", "left", "right", "bottom")
LINE_NUMBERING_KEYS = ("start", "increment", "distance", "restart")

# Non-negative lengths in twips
_LENGTH_FIELDS = (
    "page_size_w", "page_size_h",
    "margin_top", "margin_left", "margin_right", "margin_bottom",
    "gutter", "header_height", "footer_height", "cols_space",
)
_BORDER_SIZE_FIELDS = tuple(f"border_{side}_size" for side in BORDER_SIDES)
_BORDER_COLOR_FIELDS = tuple(f"border_{side}_color" for side in BORDER_SIDES)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_setting_key(key: Any) -> str:
    """
    Normalize a setting name to its attribute form.

    Leading underscores are dropped and camelCase names are converted,
    so ``marginTop`` and ``_marginTop`` both become ``margin_top``.
    """
    if not isinstance(key, str) or not key.strip("_"):
        raise ConfigurationError("Setting name must be a non-empty string", repr(key))
    return _CAMEL_BOUNDARY.sub("_", key.lstrip("_")).lower()


class SectionSettings:
    """
    Formatting options of a document section.

    Values are changed one at a time through ``set_setting_value`` or in
    bulk through ``apply``, which skips ``None`` values.
    """

    def __init__(self):
        width, height = PageSize.A4.to_twips()
        self.paper: Optional[str] = PageSize.A4.name
        self.page_size_w = width
        self.page_size_h = height
        self.orientation = Orientation.PORTRAIT

        self.margin_top = 1440
        self.margin_left = 1440
        self.margin_right = 1440
        self.margin_bottom = 1440
        self.gutter = 0
        self.header_height = 720
        self.footer_height = 720

        self.cols_num = 1
        self.cols_space = 720
        self.break_type: Optional[str] = None

        self.page_numbering_start: Optional[int] = None
        self.line_numbering: Optional[Dict[str, Any]] = None

        for field in _BORDER_SIZE_FIELDS + _BORDER_COLOR_FIELDS:
            setattr(self, field, None)

    # ------------------------------------------------------------------
    def apply(self, overrides: Optional[Mapping[str, Any]]) -> None:
        """
        Merge ``overrides`` into the current settings.

        Keys whose value is ``None`` are left untouched; there is no way
        to clear a setting through this method. The overrides are applied
        to a copy first, so an invalid key or value leaves the settings
        unchanged.

        Args:
            overrides: Mapping of setting name to value

        Raises:
            ConfigurationError: If any name is unknown or any value malformed
        """
        if overrides is None:
            return
        if not isinstance(overrides, Mapping):
            raise ConfigurationError("Section settings must be a mapping", type(overrides).__name__)

        staged = copy.copy(self)
        for key, value in overrides.items():
            if value is None:
                continue
            staged.set_setting_value(key, value)
        self.__dict__.update(staged.__dict__)

    def set_setting_value(self, key: str, value: Any) -> None:
        """
        Set a single setting.

        Args:
            key: Setting name, snake_case or camelCase
            value: New value

        Raises:
            ConfigurationError: If the name is unknown or the value malformed
        """
        name = normalize_setting_key(key)

        if name == "orientation":
            self._set_orientation(value)
        elif name == "paper":
            self._set_paper(value)
        elif name == "border_size":
            for field in _BORDER_SIZE_FIELDS:
                setattr(self, field, self._check_length(field, value, nullable=True))
        elif name == "border_color":
            for field in _BORDER_COLOR_FIELDS:
                setattr(self, field, self._check_color(field, value))
        elif name in _LENGTH_FIELDS:
            setattr(self, name, self._check_length(name, value))
        elif name in _BORDER_SIZE_FIELDS:
            setattr(self, name, self._check_length(name, value, nullable=True))
        elif name in _BORDER_COLOR_FIELDS:
            setattr(self, name, self._check_color(name, value))
        elif name == "cols_num":
            self.cols_num = self._check_int(name, value, minimum=1)
        elif name == "page_numbering_start":
            self.page_numbering_start = None if value is None else self._check_int(name, value, minimum=0)
        elif name == "break_type":
            if value is not None and value not in BREAK_TYPES:
                raise ConfigurationError(f"Invalid break type for '{name}'", f"expected one of {', '.join(BREAK_TYPES)}")
            self.break_type = value
        elif name == "line_numbering":
            self.line_numbering = self._check_line_numbering(value)
        else:
            raise ConfigurationError(f"Unknown section setting '{key}'")

        logger.debug(f"Section setting set: {name} = {value!r}")

    def get_setting_value(self, key: str) -> Any:
        """
        Get a single setting.

        Args:
            key: Setting name, snake_case or camelCase

        Returns:
            Current value
        """
        name = normalize_setting_key(key)
        if name not in self.to_dict():
            raise ConfigurationError(f"Unknown section setting '{key}'")
        return getattr(self, name)

    # ------------------------------------------------------------------
    def _set_orientation(self, value: Any) -> None:
        try:
            orientation = Orientation(value)
        except ValueError:
            raise ConfigurationError("Invalid orientation", repr(value)) from None

        if orientation != self.orientation:
            self.page_size_w, self.page_size_h = self.page_size_h, self.page_size_w
        self.orientation = orientation

    def _set_paper(self, value: Any) -> None:
        if isinstance(value, PageSize):
            paper = value
        elif isinstance(value, str) and value.upper() in PageSize.__members__:
            paper = PageSize[value.upper()]
        else:
            raise ConfigurationError("Unknown paper size", repr(value))

        width, height = paper.to_twips()
        if self.orientation == Orientation.LANDSCAPE:
            width, height = height, width
        self.paper = paper.name
        self.page_size_w = width
        self.page_size_h = height

    def _check_int(self, name: str, value: Any, minimum: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise ConfigurationError(f"Setting '{name}' must be an integer >= {minimum}", repr(value))
        return value

    def _check_length(self, name: str, value: Any, nullable: bool = False):
        if value is None and nullable:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ConfigurationError(f"Setting '{name}' must be a non-negative number", repr(value))
        return value

    def _check_color(self, name: str, value: Any) -> Optional[str]:
        if value is not None and (not isinstance(value, str) or not value):
            raise ConfigurationError(f"Setting '{name}' must be a color string", repr(value))
        return value

    def _check_line_numbering(self, value: Any) -> Optional[Dict[str, Any]]:
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise ConfigurationError("Setting 'line_numbering' must be a mapping", repr(value))
        unknown = set(value) - set(LINE_NUMBERING_KEYS)
        if unknown:
            raise ConfigurationError("Unknown line numbering options", ", ".join(sorted(unknown)))
        return dict(value)

    # ------------------------------------------------------------------
    def get_border_size(self) -> List[Optional[float]]:
        """Border sizes in top, left, right, bottom order."""
        return [getattr(self, field) for field in _BORDER_SIZE_FIELDS]

    def get_border_color(self) -> List[Optional[str]]:
        """Border colors in top, left, right, bottom order."""
        return [getattr(self, field) for field in _BORDER_COLOR_FIELDS]

    def has_borders(self) -> bool:
        return any(size is not None for size in self.get_border_size())

    def is_landscape(self) -> bool:
        return self.orientation == Orientation.LANDSCAPE

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        result = {
            'paper': self.paper,
            'page_size_w': self.page_size_w,
            'page_size_h': self.page_size_h,
            'orientation': self.orientation.value,
            'margin_top': self.margin_top,
            'margin_left': self.margin_left,
            'margin_right': self.margin_right,
            'margin_bottom': self.margin_bottom,
            'gutter': self.gutter,
            'header_height': self.header_height,
            'footer_height': self.footer_height,
            'cols_num': self.cols_num,
            'cols_space': self.cols_space,
            'break_type': self.break_type,
            'page_numbering_start': self.page_numbering_start,
            'line_numbering': dict(self.line_numbering) if self.line_numbering else None,
        }
        for field in _BORDER_SIZE_FIELDS + _BORDER_COLOR_FIELDS:
            result[field] = getattr(self, field)
        return result

    def __repr__(self) -> str:
        return (f"SectionSettings({self.page_size_w}x{self.page_size_h}, "
                f"{self.orientation.value}, cols={self.cols_num})")
