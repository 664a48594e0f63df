"""
Configuration location resolution

Turns a raw path string or Path into a canonical URI string.
"""

import re
from pathlib import Path
from typing import Union
from urllib.parse import urlsplit

from log_configurator.errors import InvalidLocationError

# Characters that may appear in a URI once spaces and backslashes are fixed
_URI_CHARS = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*$")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

Location = Union[str, Path]


def resolve_location(location: Location) -> str:
    """
    Resolve a configuration location to a URI.

    Paths and scheme-less strings become absolute ``file:`` URIs. Strings
    with a scheme are returned with backslashes turned into slashes and
    spaces encoded.

    Args:
        location: Raw path string, URI string or Path

    Returns:
        URI string

    Raises:
        InvalidLocationError: If the location cannot be expressed as a URI

    Example:
        resolve_location("conf/log.json")         # "file:///srv/app/conf/log.json"
        resolve_location("http://host/log.json")  # unchanged
    """
    if isinstance(location, Path):
        return _path_uri(location, location)
    if not isinstance(location, str):
        raise InvalidLocationError(location, f"unsupported type {type(location).__name__}")

    raw = location.strip()
    if not raw:
        raise InvalidLocationError(location, "location is empty")

    try:
        parts = urlsplit(raw)
    except ValueError as e:
        raise InvalidLocationError(location, str(e), e) from e

    # One-letter schemes are Windows drive letters
    if len(parts.scheme) <= 1:
        return _path_uri(Path(raw), location)

    if not _SCHEME.match(parts.scheme):
        raise InvalidLocationError(location, f"illegal scheme {parts.scheme!r}")

    corrected = raw.replace("\\", "/").replace(" ", "%20")
    if not _URI_CHARS.match(corrected):
        raise InvalidLocationError(location, "illegal character in URI")
    if _PERCENT.search(corrected):
        raise InvalidLocationError(location, "malformed escape sequence")

    if parts.scheme.lower() == "file" and not (parts.path or parts.netloc):
        raise InvalidLocationError(location, "file URI has no path")
    return corrected


def _path_uri(path: Path, original: Location) -> str:
    try:
        return path.expanduser().resolve().as_uri()
    except (OSError, ValueError, RuntimeError) as e:
        raise InvalidLocationError(original, str(e), e) from e
