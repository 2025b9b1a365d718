"""URL construction for controller actions and return-URL checks."""

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import urlencode, urlsplit


class UrlBuilder:
    """Builds relative URLs to a controller's actions.

    ``resolve`` maps an action name to its path; query parameters are
    appended in insertion order.
    """

    def __init__(self, resolve: Callable[[str], str]):
        self._resolve = resolve

    def build(self, action: str, params: Mapping[str, Any] | None = None) -> str:
        url = self._resolve(action)
        if params:
            url = f"{url}?{urlencode(params)}"
        return url


def is_safe_return_url(url: str) -> bool:
    """Accept only same-origin relative paths such as ``/articles/list?page=2``."""
    if not url.startswith("/") or url.startswith("//"):
        return False
    if "\\" in url or any(ord(char) < 0x20 for char in url):
        return False
    parts = urlsplit(url)
    return not parts.scheme and not parts.netloc
