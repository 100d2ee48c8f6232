"""
Template and Style Configuration

Value types that parameterize rendering: which template variant to use, how the
header is painted, and the user's color/font choices. These are always passed
explicitly to the renderer; nothing here is module-level mutable state.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Type, TypeVar, Union

from quire.contexts.templating.exceptions import StyleConfigError

E = TypeVar("E", bound=Enum)


class Template(Enum):
    """Named visual variant controlling default typography and decorations."""

    CLASSIC = "classic"
    MODERN = "modern"


class HeaderStyle(Enum):
    """How the title header background is painted."""

    SOLID = "solid"
    GRADIENT = "gradient"


def coerce_enum(enum_cls: Type[E], value: Union[E, str], label: str) -> E:
    """
    Accept an enum member or its string value.

    Args:
        enum_cls: Target enum class
        value: Member or case-insensitive value string (e.g., "Modern")
        label: Human-readable name used in the error message

    Raises:
        StyleConfigError: If the value names no member
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in enum_cls:
            if member.value == normalized:
                return member
    raise StyleConfigError(
        f"Unknown {label}", value=str(value), allowed=[m.value for m in enum_cls]
    )


@dataclass(frozen=True)
class StyleConfig:
    """
    User-chosen styling applied at render time.

    Attributes:
        primary_color: Color token for header background, headings, and emphasis
        accent_color: Color token for heading borders and gradient end
        font_family: Explicit font stack, or None to use the template default
        header_style: Solid or gradient header background
    """

    primary_color: str
    accent_color: str
    font_family: Optional[str] = None
    header_style: HeaderStyle = HeaderStyle.SOLID

    def with_overrides(self, **overrides) -> "StyleConfig":
        """
        Copy with the given fields replaced. None values are ignored.

        header_style may be given as a string ("solid" / "gradient").
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if "header_style" in updates:
            updates["header_style"] = coerce_enum(
                HeaderStyle, updates["header_style"], "header style"
            )
        unknown = set(updates) - set(self.__dataclass_fields__)
        if unknown:
            raise StyleConfigError(
                "Unknown style field", value=", ".join(sorted(unknown)),
                allowed=self.__dataclass_fields__,
            )
        return replace(self, **updates)
