"""Path normalization shared by the resolver and the routes feed.

Pure functions, no I/O. normalize_path is idempotent for inputs within the
length cap.

Example:
    >>> normalize_path("  //blog//post/?page=2#top ")
    '/blog/post'
    >>> normalize_path("/")
    '/'
"""

import re
from urllib.parse import parse_qsl

from src.core.constants import MAX_PATH_LENGTH

_SLASH_RUN = re.compile(r"/{2,}")


def normalize_path(raw: str) -> str:
    """Canonicalize a raw path string.

    Args:
        raw: Path as received; may carry whitespace, query or fragment.

    Returns:
        Normalized path with a single leading slash, no repeated slashes and
        no trailing slash (except the root), or "" when the input is blank,
        holds only a query or fragment, or is longer than MAX_PATH_LENGTH.
    """
    path = raw.strip()
    if path == "" or len(path) > MAX_PATH_LENGTH:
        return ""

    for marker in ("?", "#"):
        cut = path.find(marker)
        if cut != -1:
            path = path[:cut]
    if path == "":
        return ""

    path = _SLASH_RUN.sub("/", "/" + path)
    if path != "/":
        path = path.rstrip("/")
    return path


def split_path_and_query(raw: str) -> tuple[str, dict[str, str]]:
    """Split "path?query#fragment" into path and parsed query parameters.

    The fragment is discarded. Repeated parameters keep their last value.

    Args:
        raw: Combined input.

    Returns:
        Tuple of (path part, query parameters).
    """
    value = raw.strip()
    value = value.split("#", 1)[0]
    path, _, query = value.partition("?")
    return path, dict(parse_qsl(query, keep_blank_values=True))
