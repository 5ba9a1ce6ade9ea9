"""Static VARK style metadata: display name, description, icon and colours.

The interpreter reads names and descriptions from here; icons and colour
themes are carried for presentation clients only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from cornerstones.assessments.enums import VarkStyle

__all__ = [
    "StyleTheme",
    "StyleMetadata",
    "STYLE_METADATA",
    "format_style_name",
    "style_color",
    "style_metadata",
]


@dataclass(frozen=True, slots=True)
class StyleTheme:
    primary: str
    light: str
    bg: str
    border: str


@dataclass(frozen=True, slots=True)
class StyleMetadata:
    style: VarkStyle
    name: str
    description: str
    icon: str
    theme: StyleTheme


STYLE_METADATA: Mapping[str, StyleMetadata] = MappingProxyType(
    {
        VarkStyle.VISUAL: StyleMetadata(
            style=VarkStyle.VISUAL,
            name="Visual",
            description=(
                "You learn best through images, diagrams, charts, and visual demonstrations. "
                "Seeing information helps you understand and remember it."
            ),
            icon="eye",
            theme=StyleTheme(primary="#9333EA", light="#F3E8FF", bg="#FAF5FF", border="#E9D5FF"),
        ),
        VarkStyle.AUDITORY: StyleMetadata(
            style=VarkStyle.AUDITORY,
            name="Auditory",
            description=(
                "You learn best through listening, discussions, and verbal explanations. "
                "Hearing information and talking about it helps solidify your understanding."
            ),
            icon="ear",
            theme=StyleTheme(primary="#0891B2", light="#CFFAFE", bg="#ECFEFF", border="#A5F3FC"),
        ),
        VarkStyle.READING_WRITING: StyleMetadata(
            style=VarkStyle.READING_WRITING,
            name="Reading/Writing",
            description=(
                "You learn best through reading and writing. Taking detailed notes, reading "
                "textbooks, and expressing ideas in writing are your strengths."
            ),
            icon="book-open",
            theme=StyleTheme(primary="#059669", light="#D1FAE5", bg="#ECFDF5", border="#A7F3D0"),
        ),
        VarkStyle.KINESTHETIC: StyleMetadata(
            style=VarkStyle.KINESTHETIC,
            name="Kinesthetic",
            description=(
                "You learn best through hands-on experiences, practical activities, and "
                "real-world applications. Doing and experiencing helps you learn."
            ),
            icon="hand",
            theme=StyleTheme(primary="#DC2626", light="#FEE2E2", bg="#FEF2F2", border="#FECACA"),
        ),
    }
)


def style_metadata(style: str) -> StyleMetadata:
    """Return metadata for a known tag; raises ``KeyError`` otherwise."""
    return STYLE_METADATA[style]


def format_style_name(style: str) -> str:
    """Display name for a tag, or the tag itself when it is not a VARK style."""
    meta = STYLE_METADATA.get(style)
    return meta.name if meta else style


def style_color(style: str) -> StyleTheme:
    """Colour theme for a tag, falling back to the visual theme."""
    meta = STYLE_METADATA.get(style) or STYLE_METADATA[VarkStyle.VISUAL]
    return meta.theme
