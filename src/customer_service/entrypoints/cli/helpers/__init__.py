"""CLI helpers for customer-service.

URL sanitization for safe display, NAME=LEVEL logger option parsing, and
message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .db_url import sanitize_url
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["sanitize_url", "parse_log_level", "warn", "success", "error"]
