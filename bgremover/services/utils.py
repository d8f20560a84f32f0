from __future__ import annotations

import re
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlsplit
from uuid import uuid4

_suffix_re = re.compile(r"^\.[a-z0-9]{1,8}$")


def safe_suffix(filename: Optional[str]) -> str:
    """Return the lowercase extension of ``filename`` if it is short and alphanumeric."""
    if not filename:
        return ""
    suffix = Path(filename).suffix.lower()
    if _suffix_re.match(suffix):
        return suffix
    return ""


def generate_filename(original: Optional[str] = None) -> str:
    return f"{uuid4().hex}{safe_suffix(original)}"


def filename_from_url(url: str) -> str:
    """Return the final path segment of ``url``.

    Query strings and fragments are ignored. Percent escapes are left as-is so
    an encoded slash never turns into a path separator.
    """
    path = urlsplit(url).path or url
    return PurePosixPath(path).name
