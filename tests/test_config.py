import importlib

import pytest

from hidecart import config
from hidecart.host import get_variant
from hidecart.plugin import Variant


@pytest.fixture
def reload_config(monkeypatch):
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


def test_unknown_variant_fails_at_import(reload_config):
    reload_config.setenv("HIDE_CART_VARIANT", "sideways")
    with pytest.raises(RuntimeError, match="HIDE_CART_VARIANT"):
        importlib.reload(config)


def test_variant_is_normalised(reload_config):
    reload_config.setenv("HIDE_CART_VARIANT", " Legacy ")
    importlib.reload(config)
    assert config.HIDE_CART_VARIANT == "legacy"
    assert get_variant() is Variant.LEGACY
