"""
Template Preset Resolution

Loads template_presets.yaml and turns it into StyleConfig defaults. Each template
carries its own default colors, header style, and font stack; the palette and font
lists back the customization surface.

Examples:
    >>> style = default_style("modern")
    >>> style.header_style
    <HeaderStyle.GRADIENT: 'gradient'>

    >>> template_font(Template.CLASSIC)
    'Georgia, serif'
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

from quire.contexts.templating.exceptions import StyleConfigError
from quire.contexts.templating.style import HeaderStyle, StyleConfig, Template, coerce_enum

load_dotenv()
QUIRE_PRESETS_PATH = Path(
    os.getenv("QUIRE_PRESETS_PATH", Path(__file__).parent / "template_presets.yaml")
)


@lru_cache(maxsize=None)
def load_template_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load the presets config file as plain containers.

    Each file is read once per process; rendering works from the cached copy.
    Call load_template_presets.cache_clear() after editing presets on disk.

    Args:
        config_path: Optional path to config file (defaults to QUIRE_PRESETS_PATH)

    Returns:
        Dict with "templates", "palette", and "fonts" keys
    """
    if config_path is None:
        config_path = QUIRE_PRESETS_PATH

    presets = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    if "templates" not in presets:
        raise StyleConfigError(f"Presets file has no 'templates' key: {config_path}")

    return presets


def _template_preset(template: Template, config_path: Path = None) -> Dict[str, Any]:
    templates = load_template_presets(config_path)["templates"]
    if template.value not in templates:
        raise StyleConfigError(
            "No preset for template", value=template.value, allowed=templates.keys()
        )
    return templates[template.value]


def template_font(template: Union[Template, str], config_path: Path = None) -> str:
    """Default font stack for a template (classic: serif, modern: sans-serif)."""
    template = coerce_enum(Template, template, "template")
    return _template_preset(template, config_path)["font_family"]


def default_style(template: Union[Template, str], config_path: Path = None) -> StyleConfig:
    """
    StyleConfig a user starts from when picking a template.

    font_family is left as None so the renderer resolves the template's default
    font; an explicit font chosen later always takes precedence.
    """
    template = coerce_enum(Template, template, "template")
    preset = _template_preset(template, config_path)

    return StyleConfig(
        primary_color=preset["primary_color"],
        accent_color=preset["accent_color"],
        font_family=None,
        header_style=coerce_enum(HeaderStyle, preset["header_style"], "header style"),
    )


def resolve_color(token: str, config_path: Path = None) -> str:
    """
    Map a palette name (e.g., "indigo") to its color value.

    Any other token is returned unchanged so free-form colors stay valid.
    """
    palette = load_template_presets(config_path).get("palette", {})
    return palette.get(token.strip().lower(), token)


def resolve_font(token: str, config_path: Path = None) -> str:
    """Map a font option name (e.g., "roboto") to its font stack; other tokens pass through."""
    fonts = load_template_presets(config_path).get("fonts", {})
    return fonts.get(token.strip().lower(), token)
