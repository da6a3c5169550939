"""Text held as ISO 8859-1 (Latin-1) bytes."""

from __future__ import annotations

from dataclasses import dataclass


class Iso8859TranscodeError(ValueError):
    """Raised when a character has no ISO 8859-1 representation."""


@dataclass(frozen=True)
class Iso8859String:
    """A string stored as ISO 8859-1 encoded bytes."""

    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Iso8859String:
        """Wrap bytes that are already ISO 8859-1 encoded."""
        return cls(bytes(data))

    @classmethod
    def from_str(cls, value: str) -> Iso8859String:
        """Encode text, failing if any character lies outside code points 0-255."""
        try:
            return cls(value.encode("latin-1"))
        except UnicodeEncodeError as exc:
            raise Iso8859TranscodeError(
                f"character {value[exc.start]!r} cannot be represented in ISO 8859-1"
            ) from None

    def as_bytes(self) -> bytes:
        """Return the encoded bytes."""
        return self.data

    def __str__(self) -> str:
        return self.data.decode("latin-1")