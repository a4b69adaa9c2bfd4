import os
import tempfile

import pytest
from sqlalchemy.exc import OperationalError

# must be set before hidecart.config is imported
_DB_DIR = tempfile.mkdtemp(prefix="hidecart-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ.setdefault("JWT_SECRET", "test-secret")

from fastapi.testclient import TestClient  # noqa: E402

from hidecart.auth import create_access_token  # noqa: E402
from hidecart.host import get_variant  # noqa: E402
from hidecart.main import app  # noqa: E402
from hidecart.plugin import Variant  # noqa: E402


class FakeCart:
    def __init__(self, exists=True, empty=True):
        self.exists = exists
        self.empty = empty
        self.calls = 0

    def cart_exists(self):
        return self.exists

    def cart_is_empty(self):
        self.calls += 1
        return self.empty


class BrokenSession:
    """AsyncSession stand-in whose queries fail like an unreachable database."""

    def __init__(self):
        self.rolled_back = False

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is down"))

    async def get(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is down"))

    async def rollback(self):
        self.rolled_back = True


class Halt(Exception):
    pass


class FakePage:
    def __init__(self, is_cart=True, shop="https://x/shop/", home="https://x/", cart="https://x/cart/"):
        self.is_cart = is_cart
        self.shop = shop
        self.home = home
        self.cart = cart
        self.redirected_to = None

    def is_cart_page(self):
        return self.is_cart

    def cart_url(self):
        return self.cart

    def resolve_permalink(self, page_id):
        return self.shop if page_id == "shop" else None

    def home_url(self):
        return self.home

    def redirect(self, url):
        self.redirected_to = url
        raise Halt(url)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def legacy():
    app.dependency_overrides[get_variant] = lambda: Variant.LEGACY
    yield
    app.dependency_overrides.pop(get_variant, None)


@pytest.fixture
def admin_headers():
    token = create_access_token({"sub": "tests", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}
