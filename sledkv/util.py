"""
General utilities for sledkv.
"""

from typing import Any
from urllib.parse import urlparse


def is_valid_url(candidate_str: Any) -> bool:
    if not isinstance(candidate_str, str):
        return False
    parsed = urlparse(candidate_str)
    return parsed.scheme in ("http", "https") and parsed.netloc != ""
