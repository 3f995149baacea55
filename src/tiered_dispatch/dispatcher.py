"""
dispatcher.py — Builds handler chains and issues requests through them.

There is no shared, process-wide chain: every Dispatcher is handed (or builds)
its own, and the chain must be complete before the first request is sent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Type

from tiered_dispatch.errors import ChainConfigurationError
from tiered_dispatch.handler import Handler
from tiered_dispatch.request import Request
from tiered_dispatch.storage import FastStorage, KeyValueStorage, SlowStorage

logger = logging.getLogger(__name__)

# Tier kinds accepted by TierConfig.
STORAGE_KINDS: Dict[str, Type[KeyValueStorage]] = {
    "fast": FastStorage,
    "slow": SlowStorage,
}


@dataclass
class TierConfig:
    """
    Describes one storage tier of a chain.

    :param kind: Key into STORAGE_KINDS ("fast" or "slow").
    :param data: Key-value pairs the tier serves.
    :param name: Optional trace identifier for the tier.
    """
    kind: str
    data: Mapping[Hashable, Any] = field(default_factory=dict)
    name: Optional[str] = None

    def build(self) -> KeyValueStorage:
        try:
            storage_cls = STORAGE_KINDS[self.kind]
        except KeyError:
            raise ChainConfigurationError(
                f"Unknown tier kind {self.kind!r}; expected one of {sorted(STORAGE_KINDS)}"
            ) from None
        return storage_cls(self.data, name=self.name)


def build_chain(handlers: Iterable[Handler]) -> Handler:
    """
    Link handlers in the given order.

    :param handlers: Handlers in evaluation order.
    :return: The head of the chain.
    :raises ChainConfigurationError: If no handler is given.
    """
    head: Optional[Handler] = None
    for handler in handlers:
        if head is None:
            if not isinstance(handler, Handler):
                raise ChainConfigurationError(f"Cannot chain {handler!r}: not a Handler")
            head = handler
        else:
            head.append(handler)
    if head is None:
        raise ChainConfigurationError("A chain needs at least one handler")
    return head


def build_tiered_chain(tiers: Iterable[TierConfig]) -> Handler:
    """
    Build storage handlers from tier configs and chain them, first tier first.

    :param tiers: Tier descriptions in priority order.
    :return: The head of the chain.
    """
    return build_chain(tier.build() for tier in tiers)


class Dispatcher:
    """
    Owns the head of a chain and sends requests through it.

    :param head: First handler of a fully built chain.
    """

    def __init__(self, head: Handler) -> None:
        if head is None:
            raise ChainConfigurationError("Dispatcher requires a chain with at least one handler")
        self._head = head

    @property
    def head(self) -> Handler:
        return self._head

    def dispatch(self, request: Request) -> bool:
        """
        Send `request` through the chain.

        :param request: Request to resolve; mutated in place.
        :return: True if some handler resolved it.
        """
        processed = self._head.handle(request)
        if processed:
            logger.info("Resolved %r via %s", request.key, request.handled_by)
        else:
            logger.warning("No handler resolved %r (tried %s)",
                           request.key, " -> ".join(request.trace))
        return processed

    def get(self, key: Hashable) -> Request:
        """
        Issue a GET for `key`.

        :return: The dispatched request, for inspecting response and trace.
        """
        request = Request.get(key)
        self.dispatch(request)
        return request

    def lookup(self, key: Hashable, default: Any = None) -> Any:
        """:return: The value for `key` from the first tier holding it, else `default`."""
        request = self.get(key)
        return request.response if request.resolved else default

    def describe(self) -> List[str]:
        """:return: Handler names in evaluation order."""
        return [handler.name for handler in self._head]


def build_default_dispatcher() -> Dispatcher:
    """
    Build the reference two-tier setup: FastStorage{bar} -> SlowStorage{bar, foo}.

    :return: A Dispatcher over a fresh chain.
    """
    head = build_tiered_chain([
        TierConfig("fast", {"bar": "baz"}),
        TierConfig("slow", {"bar": "baz", "foo": "bar"}),
    ])
    return Dispatcher(head)


__all__ = [
    "STORAGE_KINDS",
    "TierConfig",
    "build_chain",
    "build_tiered_chain",
    "Dispatcher",
    "build_default_dispatcher",
]
