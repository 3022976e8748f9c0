"""Immutable option sets for the module-level load/dump functions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    allow_extra_data lets loads/load ignore anything after the first
    complete value, matching what JsonParser.parse_value does on its own.
    """

    allow_extra_data: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.allow_extra_data, bool):
            raise TypeError("allow_extra_data must be a boolean")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures encoding behavior with immutable settings.

    indent is the number of spaces per nesting level; 0 writes compact
    output without any inserted whitespace.
    """

    indent: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.indent, int) or isinstance(self.indent, bool):
            raise TypeError("indent must be an integer")
        if self.indent < 0:
            raise ValueError("indent must be non-negative")
