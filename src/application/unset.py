from __future__ import annotations

from typing import Any


class _Unset:
    """Marks an update field the caller did not send, as opposed to an explicit null."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()
