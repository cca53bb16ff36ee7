"""Named URI routes rendered under an optional base URL."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from uritag.config.schema import RoutesConfig
from uritag.core.models import raw
from uritag.core.render import format_uri, render

logger = logging.getLogger(__name__)


class RouteTable:
    """A set of named ``format_uri`` patterns.

    The base URL, when set, is prefixed as a raw value and never encoded.
    Tables are usually built from a YAML config with :meth:`from_config`;
    :func:`~uritag.core.render.format_uri` and friends need no config.
    """

    def __init__(self, patterns: Mapping[str, str], base_url: str | None = None) -> None:
        self._patterns = dict(patterns)
        self.base_url = base_url

    @classmethod
    def from_config(cls, config: RoutesConfig) -> RouteTable:
        return cls(config.patterns, base_url=config.base_url)

    def names(self) -> list[str]:
        return sorted(self._patterns)

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def pattern(self, name: str) -> str:
        """Return the pattern registered under *name*.

        Raises:
            KeyError: If no route has that name.
        """
        try:
            return self._patterns[name]
        except KeyError:
            raise KeyError(
                f"Unknown route: {name!r}. Known: {', '.join(self.names()) or '(none)'}"
            ) from None

    def build(self, name: str, /, *args: Any, **kwargs: Any) -> str:
        """Render route *name* with the given field values."""
        path = format_uri(self.pattern(name), *args, **kwargs)
        if self.base_url:
            path = render(["", path], [raw(self.base_url)])
        logger.debug("Built route %s -> %s", name, path)
        return path
