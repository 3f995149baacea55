"""
Chain of Responsibility (Behavioral)

Intent:
    Pass a request along an ordered list of handlers; each handler decides on
    its own whether it can satisfy the request, and the request moves on to the
    next handler only when it cannot.

Participants:
    - Handler (abstract): owns an optional successor and implements `processing`.
    - dispatch: walks the chain; forwarding lives here, not in subclasses.
    - Client: builds the chain with `append` and calls `handle`.

Notes:
    - `processing` never forwards, so every visited handler is traced exactly
      once and no subclass can skip the forwarding step.
    - The chain must be fully built before it is dispatched through.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from tiered_dispatch.errors import ChainConfigurationError
from tiered_dispatch.request import Request

logger = logging.getLogger(__name__)


class Handler(ABC):
    """
    Abstract link in the chain.

    :param name: Identifier written to the request trace; defaults to the class name.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self._name = name or type(self).__name__
        self._successor: Optional[Handler] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def successor(self) -> Optional["Handler"]:
        return self._successor

    def append(self, handler: "Handler") -> "Handler":
        """
        Attach `handler` after the current tail of the chain.

        Existing links are never replaced, so append order is evaluation order.

        :param handler: Handler to attach.
        :return: self, so calls can be chained.
        """
        if not isinstance(handler, Handler):
            raise ChainConfigurationError(f"Cannot append {handler!r}: not a Handler")
        tail = self
        while tail._successor is not None:
            tail = tail._successor
        tail._successor = handler
        logger.debug("Appended %s after %s", handler.name, tail.name)
        return self

    def handle(self, request: Request) -> bool:
        """
        Dispatch `request` starting at this handler.

        :param request: Request to resolve; mutated in place.
        :return: True if some handler in the chain resolved it.
        """
        return dispatch(self, request)

    @abstractmethod
    def processing(self, request: Request) -> bool:
        """
        Try to resolve the request locally.

        :param request: Request to inspect; set `request.response` on success.
        :return: True if the request has been resolved here.
        """
        raise NotImplementedError

    def __iter__(self) -> Iterator["Handler"]:
        node: Optional[Handler] = self
        while node is not None:
            yield node
            node = node._successor

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


def dispatch(head: Optional[Handler], request: Request) -> bool:
    """
    Run `request` through the chain starting at `head`.

    Each handler is stamped onto the trace before its `processing` runs.
    The walk stops at the first handler that resolves the request, or after
    the last handler declines.

    :param head: First handler of the chain.
    :param request: Request to resolve.
    :return: True if resolved, False once the chain is exhausted.
    :raises ChainConfigurationError: If there is no chain to dispatch through.
    """
    if head is None:
        raise ChainConfigurationError("Cannot dispatch a request through an empty chain")

    node: Optional[Handler] = head
    while node is not None:
        request.trace.append(node.name)
        if node.processing(request):
            logger.debug("%s resolved %s %r", node.name, request.verb, request.key)
            return True
        if node.successor is not None:
            logger.debug("%s declined %r, forwarding to %s",
                         node.name, request.key, node.successor.name)
        node = node.successor

    logger.debug("Chain exhausted for %s %r", request.verb, request.key)
    return False


__all__ = ["Handler", "dispatch"]
