from uritag.core.builder import UriBuilder
from uritag.core.encoding import UNRESERVED_MARKS, encode_component
from uritag.core.models import Encoded, Literal, Raw, RawValue, Segment, raw, to_segment
from uritag.core.render import format_uri, render, render_segments, uri, urlify
from uritag.core.routes import RouteTable

__all__ = [
    "RawValue", "raw", "Segment", "Literal", "Encoded", "Raw", "to_segment",
    "UNRESERVED_MARKS", "encode_component",
    "render", "render_segments", "uri", "urlify", "format_uri",
    "UriBuilder", "RouteTable",
]
