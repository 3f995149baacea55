"""
storage.py — Key-value tiers that plug into a handler chain.

FastStorage and SlowStorage share one capability but own independent data.
Put the fast tier first: when two tiers hold the same key, the earlier one
answers and the later one is never asked.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional

from tiered_dispatch.handler import Handler
from tiered_dispatch.request import Request, Verb


class KeyValueStorage(Handler):
    """
    Handler backed by a read-only mapping.

    :param data: Key-value pairs served by this tier; copied at construction.
    :param name: Optional trace identifier; defaults to the class name.
    """

    def __init__(self, data: Optional[Mapping[Hashable, Any]] = None,
                 name: Optional[str] = None) -> None:
        super().__init__(name=name)
        self._data: Mapping[Hashable, Any] = MappingProxyType(dict(data or {}))

    @property
    def data(self) -> Mapping[Hashable, Any]:
        """:return: Read-only view of this tier's mapping."""
        return self._data

    def processing(self, request: Request) -> bool:
        """
        Answer GET requests for keys this tier holds.

        :param request: Incoming request.
        :return: True and sets `request.response` if the key is present; False otherwise.
        """
        if request.verb == Verb.GET and request.key in self._data:
            request.response = self._data[request.key]
            return True
        return False

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class FastStorage(KeyValueStorage):
    """Front tier, e.g. an in-process cache."""


class SlowStorage(KeyValueStorage):
    """Backing tier consulted when the faster ones miss."""


__all__ = ["KeyValueStorage", "FastStorage", "SlowStorage"]
