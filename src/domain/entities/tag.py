"""Tag domain entity."""

import re
from dataclasses import dataclass, field
from uuid import uuid4

DEFAULT_TAG_COLOR = "#3b82f6"  # Default blue

HEX_COLOR_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")


def contrast_color(hex_color: str) -> str:
    """Pick black or white label text for a background color.

    Uses perceived luminance (0.299 R + 0.587 G + 0.114 B). Anything that
    is not a six-digit hex color gets black text.
    """
    match = HEX_COLOR_RE.match(hex_color.strip())
    if not match:
        return "#000000"
    digits = match.group(1)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "#000000" if luminance > 0.5 else "#ffffff"


@dataclass(frozen=True, slots=True)
class Tag:
    """Domain entity for a Tag."""

    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    color: str = DEFAULT_TAG_COLOR

    @property
    def label_color(self) -> str:
        """Text color that stays readable on top of ``color``."""
        return contrast_color(self.color)
