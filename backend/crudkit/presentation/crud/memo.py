"""Single-slot cache for request-scoped lazy values."""

from typing import Generic, TypeVar

T = TypeVar("T")


class Memo(Generic[T]):
    """Holds either nothing yet, or one computed value which may be ``None``.

    Keeping the state explicit lets "looked up and found nothing" stay
    distinct from "not looked up yet".
    """

    __slots__ = ("_computed", "_value")

    def __init__(self) -> None:
        self._computed = False
        self._value: T | None = None

    @property
    def computed(self) -> bool:
        return self._computed

    def get(self) -> T | None:
        if not self._computed:
            raise LookupError("value has not been computed yet")
        return self._value

    def set(self, value: T | None) -> T | None:
        self._computed = True
        self._value = value
        return value
