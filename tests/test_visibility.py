import asyncio

from conftest import BrokenSession, FakeCart
from hidecart.host import CartSnapshot, load_cart
from hidecart.oracle import CartStateOracle
from hidecart.rules import VisibilityRule


def test_suppresses_only_when_cart_is_empty():
    assert VisibilityRule(CartStateOracle(FakeCart(empty=True))).should_suppress() is True
    assert VisibilityRule(CartStateOracle(FakeCart(empty=False))).should_suppress() is False


def test_fails_open_without_cart_service():
    assert CartStateOracle(None).is_empty() is False
    assert VisibilityRule(CartStateOracle(None)).should_suppress() is False


def test_fails_open_when_cart_not_initialised():
    cart = FakeCart(exists=False, empty=True)
    assert VisibilityRule(CartStateOracle(cart)).should_suppress() is False
    # the emptiness check is never reached
    assert cart.calls == 0


def test_rule_reads_cart_on_every_call():
    cart = FakeCart(empty=True)
    rule = VisibilityRule(CartStateOracle(cart))
    assert rule.should_suppress() is True
    cart.empty = False
    assert rule.should_suppress() is False
    assert cart.calls == 2


def test_cart_snapshot_without_cookie_is_empty_and_available():
    snapshot = asyncio.run(load_cart(session=None, cart_key=None))
    assert snapshot.cart_exists() is True
    assert snapshot.cart_is_empty() is True
    assert snapshot.count == 0


def test_cart_snapshot_database_error_marks_cart_unavailable():
    session = BrokenSession()
    snapshot = asyncio.run(load_cart(session, "abc"))
    assert snapshot == CartSnapshot(key="abc", available=False)
    assert session.rolled_back is True
    assert VisibilityRule(CartStateOracle(snapshot)).should_suppress() is False
