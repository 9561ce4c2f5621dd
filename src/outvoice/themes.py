"""
Theme registry for the rendered invoice document.

Themes are plain data: a display name, a font stack, swatch colors for the
theme selector and a set of style tokens (CSS property mappings) that the
document renderer applies to each region of the invoice. The registry is
built once at import and never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

DEFAULT_THEME_ID = "modern"

StyleToken = Mapping[str, str]


@dataclass(frozen=True, slots=True)
class ThemePreview:
    """Swatch colors shown in the theme selector."""

    background: str
    primary: str
    secondary: str


@dataclass(frozen=True, slots=True)
class ThemeStyles:
    """Style tokens for each region of the invoice document."""

    container: StyleToken
    header: StyleToken
    from_to: StyleToken
    table_header: StyleToken
    table_row: StyleToken
    totals: StyleToken
    total_row: StyleToken
    footer: StyleToken

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return the tokens as plain, independent dictionaries."""
        return {
            name: dict(getattr(self, name)) for name in self.__dataclass_fields__
        }


@dataclass(frozen=True, slots=True)
class Theme:
    """A named, registered invoice theme."""

    id: str
    name: str
    font: str
    preview: ThemePreview
    styles: ThemeStyles


def _styles(**tokens: dict[str, str]) -> ThemeStyles:
    return ThemeStyles(
        **{name: MappingProxyType(dict(value)) for name, value in tokens.items()}
    )


_THEMES: tuple[Theme, ...] = (
    Theme(
        id="classic",
        name="Classic",
        font="Merriweather, serif",
        preview=ThemePreview("#f3f4f6", "#1f2937", "#e5e7eb"),
        styles=_styles(
            container={"background": "#ffffff", "color": "#1f2937"},
            header={
                "border_bottom": "2px solid #1f2937",
                "padding_bottom": "1rem",
                "margin_bottom": "2rem",
            },
            from_to={"font_size": "0.875rem"},
            table_header={
                "background": "#f3f4f6",
                "border_bottom": "2px solid #d1d5db",
                "font_weight": "700",
                "color": "#111827",
            },
            table_row={"border_bottom": "1px solid #e5e7eb"},
            totals={},
            total_row={"border_top": "2px solid #1f2937", "color": "#111827"},
            footer={
                "text_align": "center",
                "font_size": "0.75rem",
                "color": "#6b7280",
                "padding_top": "1rem",
                "margin_top": "2rem",
                "border_top": "1px solid #e5e7eb",
            },
        ),
    ),
    Theme(
        id="modern",
        name="Modern",
        font="Roboto, sans-serif",
        preview=ThemePreview("#ffffff", "#2563eb", "#dbeafe"),
        styles=_styles(
            container={"background": "#ffffff", "color": "#111827"},
            header={"margin_bottom": "2.5rem"},
            from_to={"font_size": "0.875rem"},
            table_header={
                "background": "#eff6ff",
                "color": "#1d4ed8",
                "font_weight": "500",
                "text_transform": "uppercase",
                "letter_spacing": "0.05em",
                "font_size": "0.75rem",
            },
            table_row={"border_bottom": "1px solid #e5e7eb"},
            totals={},
            total_row={"color": "#1d4ed8"},
            footer={
                "text_align": "center",
                "font_size": "0.75rem",
                "color": "#6b7280",
                "padding_top": "1rem",
                "margin_top": "2rem",
            },
        ),
    ),
    Theme(
        id="minimal",
        name="Minimal",
        font="Lato, sans-serif",
        preview=ThemePreview("#ffffff", "#000000", "#f3f4f6"),
        styles=_styles(
            container={"background": "#ffffff", "color": "#000000"},
            header={"margin_bottom": "3rem"},
            from_to={"font_size": "0.75rem", "margin_bottom": "2.5rem"},
            table_header={
                "border_bottom": "2px solid #000000",
                "font_weight": "700",
                "text_transform": "uppercase",
                "letter_spacing": "0.1em",
                "font_size": "0.75rem",
            },
            table_row={"border_bottom": "1px solid #e5e7eb"},
            totals={"margin_top": "2rem"},
            total_row={"border_top": "1px solid #000000"},
            footer={
                "text_align": "center",
                "font_size": "0.75rem",
                "color": "#9ca3af",
                "padding_top": "1rem",
                "margin_top": "2rem",
            },
        ),
    ),
    Theme(
        id="bold",
        name="Bold",
        font="Montserrat, sans-serif",
        preview=ThemePreview("#1f2937", "#facc15", "#374151"),
        styles=_styles(
            container={"background": "#111827", "color": "#ffffff"},
            header={
                "margin_bottom": "2rem",
                "background": "#1f2937",
                "padding": "1.5rem",
                "border_radius": "0.5rem",
            },
            from_to={"font_size": "0.875rem"},
            table_header={
                "background": "#facc15",
                "color": "#111827",
                "text_transform": "uppercase",
                "font_size": "0.875rem",
                "font_weight": "700",
            },
            table_row={"border_bottom": "1px solid #374151"},
            totals={},
            total_row={"color": "#facc15"},
            footer={
                "text_align": "center",
                "font_size": "0.875rem",
                "color": "#9ca3af",
                "padding_top": "1rem",
                "margin_top": "2rem",
                "border_top": "1px solid #374151",
            },
        ),
    ),
    Theme(
        id="elegant",
        name="Elegant",
        font="'Playfair Display', serif",
        preview=ThemePreview("#fbf9f6", "#4b4237", "#eae6e1"),
        styles=_styles(
            container={"background": "#fbf9f6", "color": "#4b4237"},
            header={"text_align": "center", "margin_bottom": "3rem"},
            from_to={"font_size": "0.875rem"},
            table_header={
                "border_top": "1px solid #dcd6cc",
                "border_bottom": "1px solid #dcd6cc",
                "font_weight": "400",
                "color": "#4b4237",
                "text_transform": "uppercase",
                "font_size": "0.75rem",
                "letter_spacing": "0.1em",
            },
            table_row={"border_bottom": "1px solid #eae6e1"},
            totals={},
            total_row={"color": "#4b4237"},
            footer={
                "text_align": "center",
                "font_size": "0.875rem",
                "color": "#928b81",
                "padding_top": "1.5rem",
                "margin_top": "2.5rem",
                "border_top": "1px solid #eae6e1",
            },
        ),
    ),
)

THEMES: Mapping[str, Theme] = MappingProxyType({theme.id: theme for theme in _THEMES})


def lookup(theme_id: str | None) -> Theme:
    """
    Return the theme registered under theme_id.

    Unknown or missing ids (for example from a corrupt or newer stored
    invoice) resolve to the default theme instead of raising.
    """
    if not isinstance(theme_id, str):
        return THEMES[DEFAULT_THEME_ID]
    return THEMES.get(theme_id, THEMES[DEFAULT_THEME_ID])


def theme_ids() -> list[str]:
    """Return the registered theme ids in display order."""
    return [theme.id for theme in _THEMES]


def is_registered(theme_id: str | None) -> bool:
    """Return True if theme_id names a registered theme."""
    return isinstance(theme_id, str) and theme_id in THEMES
