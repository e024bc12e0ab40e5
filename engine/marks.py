"""Player marks."""

from __future__ import annotations

from enum import Enum

from engine.errors import InvalidConfiguration


class Mark(str, Enum):
    """Symbol a player occupies cells with."""

    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    @classmethod
    def parse(cls, value: object) -> "Mark":
        if isinstance(value, Mark):
            return value
        text = str(value).strip().upper()
        try:
            return cls(text)
        except ValueError:
            raise InvalidConfiguration(f"Unknown mark: {value!r}") from None


MARKS = (Mark.X, Mark.O)
