"""Fluent URI builder."""
from __future__ import annotations

from typing import Any

from uritag.core.models import Encoded, Literal, Raw, RawValue, Segment, raw, to_segment
from uritag.core.render import render_segments


class UriBuilder:
    """Assemble a URI piece by piece.

    Example:
        >>> (UriBuilder()
        ...     .append_raw("/api/v1")
        ...     .append("/users/")
        ...     .append_encoded("admin/manager")
        ...     .build())
        '/api/v1/users/admin%2Fmanager'
    """

    def __init__(self) -> None:
        self._segments: list[Segment] = []

    def append(self, literal: str) -> UriBuilder:
        """Append constant text, emitted verbatim."""
        self._segments.append(Literal(literal))
        return self

    def append_encoded(self, value: Any) -> UriBuilder:
        """Append a value that is percent-encoded.

        A ``RawValue`` passed here has its text encoded like any other string.
        """
        if isinstance(value, RawValue):
            value = value.raw
        self._segments.append(Encoded(value))
        return self

    def append_raw(self, value: Any) -> UriBuilder:
        """Append a value that is inserted without encoding."""
        self._segments.append(Raw(raw(value).raw))
        return self

    def append_value(self, value: Any) -> UriBuilder:
        """Append a value, encoding it unless it was wrapped with ``raw()``."""
        self._segments.append(to_segment(value))
        return self

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def build(self) -> str:
        return render_segments(self._segments)
