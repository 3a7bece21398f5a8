import re
from urllib.parse import urljoin, urlsplit

SAFE_URL_SCHEMES = frozenset({"http", "https", "mailto"})
DEFAULT_BASE_URL = "https://example.com"

_EMBEDDED_WHITESPACE = re.compile(r"[\t\r\n]")
_EDGE_CHARACTERS = "".join(chr(code) for code in range(0x21))


def normalize_url(url: str) -> str:
    """Strip surrounding C0 controls/spaces and embedded tabs and newlines.

    Browsers ignore these characters when resolving a URL, so ``" java\\tscript:"``
    must be judged as ``"javascript:"``.
    """
    return _EMBEDDED_WHITESPACE.sub("", url.strip(_EDGE_CHARACTERS))


def is_safe_url(url: str | None, base_url: str = DEFAULT_BASE_URL) -> bool:
    """Allow-list check for link targets and image sources.

    A missing URL is safe. Otherwise the URL is resolved against ``base_url``
    and must end up with an http, https or mailto scheme. If parsing fails, the
    URL is unsafe only when it starts with ``javascript:``.
    """
    if not url:
        return True
    candidate = normalize_url(url)
    try:
        scheme = urlsplit(urljoin(base_url, candidate)).scheme
    except ValueError:
        return not candidate.lower().startswith("javascript:")
    return scheme.lower() in SAFE_URL_SCHEMES
