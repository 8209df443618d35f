from __future__ import annotations

import logging
import pwd
import threading
from collections.abc import Callable

LOGGER = logging.getLogger(__name__)


def _lookup_user_name(uid: int) -> str:
    return pwd.getpwuid(uid).pw_name


class OwnerResolver:
    def __init__(self, lookup: Callable[[int], str] | None = None) -> None:
        self._lookup = lookup or _lookup_user_name
        self._names: dict[int, str] = {}
        self._lock = threading.Lock()

    def resolve(self, uid: int) -> str:
        with self._lock:
            cached = self._names.get(uid)
        if cached is not None:
            return cached

        try:
            name = self._lookup(uid)
        except KeyError:
            LOGGER.debug("No user name for uid %d, using the numeric id", uid)
            name = str(uid)

        with self._lock:
            return self._names.setdefault(uid, name)
