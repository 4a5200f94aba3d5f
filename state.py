"""Switch state value type."""

from enum import IntEnum


class BinaryState(IntEnum):
    OFF = 0
    ON = 1

    def __str__(self):
        return "on" if self is BinaryState.ON else "off"

    @property
    def digit(self) -> str:
        """Wire form: "0" or "1"."""
        return str(int(self))

    @classmethod
    def from_digit(cls, text: str) -> "BinaryState":
        """Convert a protocol digit. Raises ValueError outside {"0", "1"}."""
        return cls(int(text))
