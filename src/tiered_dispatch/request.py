"""
request.py — The value that travels through a handler chain.

A Request is created per dispatch, mutated in place by the handlers it visits,
and read back by the caller once `handle` returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, List, Optional, Union


class Verb(str, Enum):
    """Operations a request can ask for. Only GET is served by the storage tiers."""
    GET = "get"


class _Unset:
    """Marker for a response that no handler has produced yet."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


@dataclass(slots=True)
class Request:
    """
    Mutable message passed along the chain.

    :param verb: Operation identifier; a Verb or any plain string.
    :param key: Lookup key.
    :ivar response: Value set by the resolving handler; UNSET until then
                    (None is a legal stored value).
    :ivar trace: Names of the handlers visited, in visiting order.
    """
    verb: Union[Verb, str]
    key: Hashable
    response: Any = UNSET
    trace: List[str] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        """:return: True once some handler has set a response."""
        return self.response is not UNSET

    @property
    def handled_by(self) -> Optional[str]:
        """
        Name of the last handler that processed this request.

        :return: The last trace entry, or None if the request was never dispatched.
        """
        return self.trace[-1] if self.trace else None

    @classmethod
    def get(cls, key: Hashable) -> "Request":
        """Shorthand for a GET request on `key`."""
        return cls(verb=Verb.GET, key=key)


__all__ = ["Verb", "UNSET", "Request"]
