"""Build percent-encoded URIs from literal text and interpolated values."""
from uritag.config.loader import configure_logging, load_config
from uritag.core import (
    RawValue,
    RouteTable,
    UriBuilder,
    encode_component,
    format_uri,
    raw,
    render,
    uri,
    urlify,
)

__version__ = "0.1.0"

__all__ = [
    "RawValue", "raw", "render", "uri", "urlify", "format_uri",
    "encode_component", "UriBuilder", "RouteTable",
    "load_config", "configure_logging",
]
