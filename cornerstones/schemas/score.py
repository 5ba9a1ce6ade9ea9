from __future__ import annotations

from typing import List

from pydantic import BaseModel

from cornerstones.assessments.vark.styles import StyleMetadata

__all__ = ["StyleThemeOut", "StyleOut", "StyleCatalog"]


class StyleThemeOut(BaseModel):
    primary: str
    light: str
    bg: str
    border: str


class StyleOut(BaseModel):
    style: str
    name: str
    description: str
    icon: str
    theme: StyleThemeOut

    @classmethod
    def from_metadata(cls, meta: StyleMetadata) -> "StyleOut":
        return cls(
            style=meta.style.value,
            name=meta.name,
            description=meta.description,
            icon=meta.icon,
            theme=StyleThemeOut(
                primary=meta.theme.primary,
                light=meta.theme.light,
                bg=meta.theme.bg,
                border=meta.theme.border,
            ),
        )


class StyleCatalog(BaseModel):
    significance_threshold: int
    dominant_threshold: int
    styles: List[StyleOut]
