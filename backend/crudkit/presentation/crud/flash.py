"""Flash messages stored in the signed session cookie."""

from typing import Any, Protocol

from fastapi import Request

_FLASH_KEY = "_flashes"


class FlashSink(Protocol):
    def set_flash(self, key: str, value: Any) -> None: ...


class SessionFlashSink:
    """Writes flashes into ``request.session`` (requires SessionMiddleware)."""

    def __init__(self, request: Request):
        self._request = request

    def set_flash(self, key: str, value: Any) -> None:
        flashes = dict(self._request.session.get(_FLASH_KEY, {}))
        flashes[key] = value
        self._request.session[_FLASH_KEY] = flashes


def pop_flashes(request: Request) -> dict[str, Any]:
    """Return and clear the flashes set by earlier requests."""
    return request.session.pop(_FLASH_KEY, {})
