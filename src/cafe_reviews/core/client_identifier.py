"""Client identifier - integer-backed tag that ties a batch response to its request."""

from dataclasses import dataclass
from typing import Optional


class InvalidClientIdentifier(ValueError):
    """Raised when an identifier cannot be mapped back to a request index."""


@dataclass(frozen=True)
class ClientIdentifier:
    """Zero-based position of a request within one batch submission.

    The wire form is the decimal string of the index, so identifiers are
    unique within a batch and round-trip through any provider that echoes
    them back untouched.
    """

    index: int

    def __post_init__(self):
        if self.index < 0:
            raise InvalidClientIdentifier(f"Negative index: {self.index}")

    def format(self) -> str:
        return str(self.index)

    @classmethod
    def parse(cls, raw: Optional[str], limit: int) -> "ClientIdentifier":
        """
        Parse an echoed identifier.

        Args:
            raw: Identifier string returned by the provider (may be None).
            limit: Size of the originating batch; valid indices are [0, limit).

        Raises:
            InvalidClientIdentifier: if raw is missing, non-numeric or out of range.
        """
        if raw is None:
            raise InvalidClientIdentifier("Missing client identifier")
        if not isinstance(raw, str):
            raise InvalidClientIdentifier(f"Client identifier is not a string: {raw!r}")
        text = raw.strip()
        if not text.isdecimal():
            raise InvalidClientIdentifier(f"Non-numeric client identifier: {raw!r}")
        index = int(text)
        if index >= limit:
            raise InvalidClientIdentifier(
                f"Client identifier {index} out of range for batch of {limit}"
            )
        return cls(index)

    @classmethod
    def try_parse(cls, raw: Optional[str], limit: int) -> Optional["ClientIdentifier"]:
        """Like parse(), but returns None for identifiers that must be discarded."""
        try:
            return cls.parse(raw, limit)
        except InvalidClientIdentifier:
            return None
