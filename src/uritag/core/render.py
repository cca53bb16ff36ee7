"""Render URIs from literal fragments and interpolated values."""
from __future__ import annotations

import logging
import string
from collections.abc import Iterable, Sequence
from typing import Any

from uritag.core.encoding import encode_component
from uritag.core.models import Encoded, Literal, Raw, RawValue, Segment, raw, to_segment

logger = logging.getLogger(__name__)

_formatter = string.Formatter()


# ---------------------------------------------------------------------------
# Segment rendering
# ---------------------------------------------------------------------------

def _emit(segment: Segment) -> str:
    if isinstance(segment, Encoded):
        return encode_component(segment.value)
    if isinstance(segment, Raw):
        return segment.text
    if isinstance(segment, Literal):
        return segment.text
    raise TypeError(f"Not a URI segment: {segment!r}")


def render_segments(segments: Iterable[Segment]) -> str:
    """Join segments into one string, encoding only :class:`Encoded` ones."""
    return "".join(_emit(s) for s in segments)


def _interleave(fragments: Sequence[str], values: Sequence[Any]) -> list[Segment]:
    segments: list[Segment] = []
    for i, fragment in enumerate(fragments):
        segments.append(Literal(fragment))
        if i < len(values):
            segments.append(to_segment(values[i]))
    return segments


def render(fragments: Sequence[str], values: Sequence[Any]) -> str:
    """Interleave literal fragments with encoded or raw values.

    ``fragments[i]`` is emitted verbatim and followed by ``values[i]``.
    Values wrapped with :func:`~uritag.core.models.raw` are inserted as-is;
    anything else is coerced with ``str()`` and percent-encoded.

    Args:
        fragments: Literal text, one element longer than *values*.
        values: Values to insert between the fragments.

    Returns:
        The rendered URI string.

    Raises:
        ValueError: If ``len(fragments) != len(values) + 1``.

    Examples:
        >>> render(["/users/", "?filter=", ""], ["admin/manager", "a&b"])
        '/users/admin%2Fmanager?filter=a%26b'
    """
    if len(fragments) != len(values) + 1:
        raise ValueError(
            f"Expected {len(values) + 1} fragment(s) for {len(values)} value(s), "
            f"got {len(fragments)}"
        )
    result = render_segments(_interleave(fragments, values))
    logger.debug("Rendered %d value(s) into %r", len(values), result)
    return result


# ---------------------------------------------------------------------------
# Template strings
# ---------------------------------------------------------------------------

def _prepare(value: Any, conversion: str | None, format_spec: str) -> Any:
    """Apply a ``!conversion`` and ``:format_spec`` to an interpolated value."""
    if not conversion and not format_spec:
        return value
    if isinstance(value, RawValue):
        return raw(_prepare(value.raw, conversion, format_spec))
    if conversion:
        value = _formatter.convert_field(value, conversion)
    return format(value, format_spec)


def uri(template: Any) -> str:
    """Render a template string (PEP 750 ``t"..."``) as a URI.

    Any object exposing ``strings`` and ``interpolations`` is accepted; each
    interpolation must expose ``value`` and may carry ``conversion`` and
    ``format_spec``, which are applied before encoding.

    Examples:
        >>> user = "admin/manager"
        >>> uri(t"/users/{user}")  # doctest: +SKIP
        '/users/admin%2Fmanager'
        >>> uri(t"{raw(base)}/users/{user}")  # doctest: +SKIP
        '/api/v1/users/admin%2Fmanager'
    """
    values = [
        _prepare(
            interp.value,
            getattr(interp, "conversion", None),
            getattr(interp, "format_spec", "") or "",
        )
        for interp in template.interpolations
    ]
    return render(list(template.strings), values)


urlify = uri


# ---------------------------------------------------------------------------
# Format strings
# ---------------------------------------------------------------------------

def format_uri(pattern: str, /, *args: Any, **kwargs: Any) -> str:
    """Render a ``str.format``-style pattern, percent-encoding each field.

    Literal text is kept verbatim (``{{`` and ``}}`` become braces).  Fields
    resolve like :meth:`str.format`, including ``{0}``, ``{name}``,
    ``{name.attr}``, ``{0[key]}`` and nested fields inside a format spec
    such as ``{:{width}}``.

    Raises:
        IndexError: A positional field has no matching argument.
        KeyError: A named field has no matching keyword argument.
        ValueError: Automatic and manual field numbering are mixed, or
            format specs are nested more than one level deep.

    Examples:
        >>> format_uri("/users/{}?q={q}", "a b", q="x&y")
        '/users/a%20b?q=x%26y'
        >>> format_uri("{base}/users", base=raw("/api/v1"))
        '/api/v1/users'
    """
    auto_index = 0
    numbering: str | None = None

    def resolve(field_name: str) -> Any:
        nonlocal auto_index, numbering
        if field_name == "" or field_name[0] in ".[":
            if numbering == "manual":
                raise ValueError(
                    "cannot switch from manual field specification "
                    "to automatic field numbering"
                )
            numbering = "auto"
            field_name = f"{auto_index}{field_name}"
            auto_index += 1
        elif field_name.split(".", 1)[0].split("[", 1)[0].isdigit():
            if numbering == "auto":
                raise ValueError(
                    "cannot switch from automatic field numbering "
                    "to manual field specification"
                )
            numbering = "manual"
        obj, _ = _formatter.get_field(field_name, args, kwargs)
        return obj

    def expand_spec(format_spec: str) -> str:
        # One level of nesting, as str.format allows.
        parts: list[str] = []
        for literal_text, field_name, inner_spec, conversion in _formatter.parse(format_spec):
            parts.append(literal_text)
            if field_name is None:
                continue
            if inner_spec and "{" in inner_spec:
                raise ValueError("Max string recursion exceeded")
            obj = resolve(field_name)
            if conversion:
                obj = _formatter.convert_field(obj, conversion)
            parts.append(format(obj, inner_spec or ""))
        return "".join(parts)

    fragments: list[str] = []
    values: list[Any] = []
    pending = ""

    for literal_text, field_name, format_spec, conversion in _formatter.parse(pattern):
        pending += literal_text
        if field_name is None:
            continue

        obj = resolve(field_name)
        format_spec = format_spec or ""
        if "{" in format_spec:
            format_spec = expand_spec(format_spec)
        fragments.append(pending)
        values.append(_prepare(obj, conversion, format_spec))
        pending = ""

    fragments.append(pending)
    return render(fragments, values)
