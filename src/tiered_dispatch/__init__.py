from tiered_dispatch.dispatcher import (
    STORAGE_KINDS,
    Dispatcher,
    TierConfig,
    build_chain,
    build_default_dispatcher,
    build_tiered_chain,
)
from tiered_dispatch.errors import ChainConfigurationError, ChainError
from tiered_dispatch.handler import Handler, dispatch
from tiered_dispatch.request import UNSET, Request, Verb
from tiered_dispatch.storage import FastStorage, KeyValueStorage, SlowStorage

__all__ = [
    "STORAGE_KINDS",
    "Dispatcher",
    "TierConfig",
    "build_chain",
    "build_default_dispatcher",
    "build_tiered_chain",
    "ChainConfigurationError",
    "ChainError",
    "Handler",
    "dispatch",
    "UNSET",
    "Request",
    "Verb",
    "FastStorage",
    "KeyValueStorage",
    "SlowStorage",
]
