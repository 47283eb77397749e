# urlspecs/preprocessing/normalizer.py

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from ..config import DEFAULT_SCHEME, FORBIDDEN_HOST_CHARS
from ..errors import InvalidUrlError

logger = logging.getLogger(__name__)

SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
EXPLICIT_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
# C0/C1 control characters are never part of a valid URL.
# Whitespace is only rejected in the authority; paths keep it as typed.
CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
WHITESPACE_RE = re.compile(r"\s")
# Special schemes take any run of slashes or backslashes after the colon, like browsers do.
SPECIAL_SCHEME_SLASHES_RE = re.compile(r"^(https?|wss?|ftp):[\\/]*", re.IGNORECASE)


@dataclass(frozen=True)
class NormalizedUrl:
    """An absolute URL and its components, as used by every later stage."""
    url: str
    scheme: str
    host: str
    port: Optional[int]
    path: str
    query: str
    fragment: str


def _parse_absolute(candidate: str) -> NormalizedUrl:
    """Parse `candidate` as an absolute URL or raise InvalidUrlError."""
    if CONTROL_CHARS_RE.search(candidate):
        raise InvalidUrlError(f"URL contains control characters: {candidate!r}")
    slashes = SPECIAL_SCHEME_SLASHES_RE.match(candidate)
    if slashes:
        candidate = f"{slashes.group(1)}://{candidate[slashes.end():]}"
    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid URL: {candidate!r} ({exc})") from exc

    if not parts.scheme or not SCHEME_RE.match(parts.scheme):
        raise InvalidUrlError(f"Missing URL scheme: {candidate!r}")
    if not parts.netloc:
        raise InvalidUrlError(f"Missing URL authority: {candidate!r}")
    if WHITESPACE_RE.search(parts.netloc):
        raise InvalidUrlError(f"Host contains whitespace: {candidate!r}")

    host = parts.hostname or ""
    if not host:
        raise InvalidUrlError(f"Missing host: {candidate!r}")
    # bracketed IPv6 literals are validated by urlsplit itself
    if "[" not in parts.netloc and FORBIDDEN_HOST_CHARS.intersection(host):
        raise InvalidUrlError(f"Invalid host {host!r} in {candidate!r}")

    return NormalizedUrl(
        url=candidate,
        scheme=parts.scheme.lower(),
        host=host,
        port=port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )


def normalize(raw: str, default_scheme: str = DEFAULT_SCHEME) -> NormalizedUrl:
    """
    Turn user input into an absolute URL.

    The trimmed input is kept as typed when it already parses as an absolute
    URL (spaces in the path included; a run of slashes after http(s), ws(s)
    or ftp collapses to `://`); otherwise `default_scheme://` is prepended and parsing retried.
    Input that already starts with `scheme://` is never retried.
    Raises InvalidUrlError for empty input or when both attempts fail.
    """
    trimmed = raw.strip() if isinstance(raw, str) else ""
    if not trimmed:
        raise InvalidUrlError("Please enter a URL.")

    try:
        return _parse_absolute(trimmed)
    except InvalidUrlError:
        if EXPLICIT_SCHEME_RE.match(trimmed):
            raise
        logger.debug("No usable scheme in %r, retrying with %s://", trimmed, default_scheme)

    return _parse_absolute(f"{default_scheme}://{trimmed}")
