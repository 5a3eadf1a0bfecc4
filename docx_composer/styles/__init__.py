"""Style value objects used by the document model."""

from .section_settings import (
    SectionSettings,
    Orientation,
    PageSize,
    BREAK_TYPES,
    mm_to_twips,
    normalize_setting_key,
)

__all__ = [
    "SectionSettings",
    "Orientation",
    "PageSize",
    "BREAK_TYPES",
    "mm_to_twips",
    "normalize_setting_key",
]
