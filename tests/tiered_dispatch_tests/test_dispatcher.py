import logging

import pytest
from tiered_dispatch.dispatcher import (
    Dispatcher, TierConfig, build_chain, build_default_dispatcher, build_tiered_chain
)
from tiered_dispatch.errors import ChainConfigurationError
from tiered_dispatch.request import Request, Verb
from tiered_dispatch.storage import FastStorage, SlowStorage


@pytest.mark.unit
def test_default_dispatcher_scenarios():
    d = build_default_dispatcher()
    assert d.describe() == ["FastStorage", "SlowStorage"]

    a = d.get("bar")
    assert a.resolved and a.response == "baz" and a.handled_by == "FastStorage"
    b = d.get("foo")
    assert b.resolved and b.response == "bar" and b.handled_by == "SlowStorage"
    c = d.get("missing")
    assert not c.resolved and c.handled_by == "SlowStorage"


@pytest.mark.unit
def test_default_dispatchers_do_not_share_a_chain():
    assert build_default_dispatcher().head is not build_default_dispatcher().head


@pytest.mark.unit
def test_lookup_returns_default_on_miss():
    d = build_default_dispatcher()
    assert d.lookup("foo") == "bar"
    assert d.lookup("missing", default="n/a") == "n/a"


@pytest.mark.unit
def test_dispatch_returns_handle_result():
    d = build_default_dispatcher()
    request = Request(verb=Verb.GET, key="bar")
    assert d.dispatch(request) is True
    assert d.dispatch(Request(verb=Verb.GET, key="zzz")) is False


@pytest.mark.unit
def test_tiered_chain_keeps_config_order_and_names():
    head = build_tiered_chain([
        TierConfig("fast", {"k": 1}, name="memory"),
        TierConfig("slow", {"k": 2}, name="disk"),
        TierConfig("slow", {"k": 3, "z": 26}, name="remote"),
    ])
    d = Dispatcher(head)
    assert d.describe() == ["memory", "disk", "remote"]
    assert d.lookup("k") == 1
    assert d.get("z").trace == ["memory", "disk", "remote"]


@pytest.mark.unit
def test_unknown_tier_kind_is_rejected():
    with pytest.raises(ChainConfigurationError):
        build_tiered_chain([TierConfig("warm", {})])


@pytest.mark.unit
def test_build_chain_requires_a_handler():
    with pytest.raises(ChainConfigurationError):
        build_chain([])
    with pytest.raises(ChainConfigurationError):
        Dispatcher(None)


@pytest.mark.unit
def test_build_chain_links_in_order():
    fast, slow = FastStorage({}), SlowStorage({"a": 1})
    head = build_chain([fast, slow])
    assert head is fast and fast.successor is slow


@pytest.mark.unit
def test_exhausted_dispatch_is_logged(caplog):
    d = build_default_dispatcher()
    with caplog.at_level(logging.WARNING, logger="tiered_dispatch.dispatcher"):
        d.get("missing")
    assert "FastStorage -> SlowStorage" in caplog.text
