# topmark:header:start
#
#   project      : Wia
#   file         : colored_enum.py
#   file_relpath : src/wia/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""String enums that know how to color themselves.

Each member is declared as ``(label, style)``. The label becomes the member's
string value, so members compare, hash and serialize like plain strings; the
style (a yachalk builder or any compatible callable) is available as
``member.color`` for terminal output:

    ```python
    class StepStatus(ColoredStrEnum):
        RESOLVED = ("resolved", chalk.green)

    StepStatus.RESOLVED.color(StepStatus.RESOLVED.value)
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Anything called like a yachalk builder: strings in, styled string out."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return ``args`` joined by ``sep`` and styled."""
        ...


class ColoredStrEnum(str, Enum):
    """`str` enum whose members also carry a `Colorizer`."""

    _value_: str
    _color: Colorizer

    def __new__(cls, label: str, color: Colorizer) -> ColoredStrEnum:
        """Create a member whose value is ``label``."""
        member: ColoredStrEnum = str.__new__(cls, label)
        member._value_ = label
        member._color = color
        return member

    @property
    def value(self) -> str:
        """The member's label."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The member's style."""
        return self._color
