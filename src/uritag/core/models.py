"""Core data models for uritag."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

# ---------------------------------------------------------------------------
# Raw marker
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RawValue:
    """A value that is inserted into a URI without percent-encoding.

    Build it with :func:`raw`.  Construction stores the ``str()`` form of
    the value and unwraps a nested ``RawValue``, so the held text is always
    a plain string.
    """

    raw: str

    def __post_init__(self) -> None:
        value = self.raw
        if isinstance(value, RawValue):
            value = value.raw
        if not isinstance(value, str):
            value = str(value)
        object.__setattr__(self, "raw", value)


def raw(value: Any) -> RawValue:
    """Mark *value* to be inserted verbatim, bypassing percent-encoding.

    Non-string values are stored as their ``str()`` form.  Wrapping an
    existing :class:`RawValue` yields a wrapper holding the same text.

    Examples:
        >>> raw("/api/v1")
        RawValue(raw='/api/v1')
        >>> raw(raw("/api/v1"))
        RawValue(raw='/api/v1')
        >>> raw(42)
        RawValue(raw='42')
    """
    return RawValue(value)


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Literal:
    """Constant template text, emitted verbatim."""

    text: str


@dataclass(frozen=True)
class Encoded:
    """An interpolated value that is percent-encoded on output."""

    value: Any


@dataclass(frozen=True)
class Raw:
    """An interpolated value that is emitted verbatim."""

    text: str


Segment = Union[Literal, Encoded, Raw]


def to_segment(value: Any) -> Segment:
    """Classify an interpolated value as a :class:`Raw` or :class:`Encoded` segment."""
    if isinstance(value, RawValue):
        return Raw(value.raw)
    return Encoded(value)
