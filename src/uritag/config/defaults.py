"""Default configuration template for uritag."""
from __future__ import annotations

DEFAULT_CONFIG_YAML: str = """\
# uritag configuration

routes:
  # Inserted verbatim in front of every route; never percent-encoded.
  # base_url: null  # Set via URITAG_BASE_URL env var
  patterns:
    # Fields use str.format syntax; every field value is percent-encoded.
    user: "/users/{}"
    user_search: "/users?search={query}&sort={sort}"

logging:
  level: "WARNING"  # Set via URITAG_LOG_LEVEL env var
"""
