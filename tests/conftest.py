import httpx
import jwt
import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from main import create_app

SECRET = "test-secret"
BREWERY_URL = "http://brewery.test"
NOTIFY_URL = "http://notify.test"
LOW_STOCK_URL = f"{NOTIFY_URL}/notifications/low-stock"


def inventory_url(path: str = "") -> str:
    return f"{BREWERY_URL}/api/inventory{path}"


class FakeDownstream:
    """httpx.MockTransport handler: canned answers per (method, url), records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def on(self, method, url, status_code=200, json=None, content=None, exc=None):
        self.routes[(method, url)] = (status_code, json, content, exc)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, str(request.url)))
        if route is None:
            return httpx.Response(404, json={"message": "No route in fake downstream"})
        status_code, json, content, exc = route
        if exc is not None:
            raise exc
        if json is not None:
            return httpx.Response(status_code, json=json)
        return httpx.Response(status_code, content=content or b"")

    def calls_to(self, url, method=None):
        return [
            r for r in self.requests
            if str(r.url) == url and (method is None or r.method == method)
        ]


@pytest.fixture()
def app_settings():
    s = Settings()
    s.jwt_secret = SECRET
    s.brewery_api_url = BREWERY_URL
    s.notification_api_url = NOTIFY_URL
    s.inventory_backend = "api"
    s.notification_failure_is_error = False
    return s


@pytest.fixture()
def downstream():
    return FakeDownstream()


@pytest.fixture()
def client(app_settings, downstream):
    app = create_app(app_settings, http_transport=httpx.MockTransport(downstream))
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def token():
    return jwt.encode({"id": 1, "email": "test@example.com"}, SECRET, algorithm="HS256")


@pytest.fixture()
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def valid_product():
    return {
        "name": "Beer",
        "type": "Beer",
        "description": "A crisp lager",
        "abv": 5.0,
        "volume": 355,
        "package": "Can",
        "price": 3.5,
        "cost": 1.25,
        "stockQuantity": 100,
        "reorderPoint": 20,
        "tasteProfile": {"primaryFlavor": "Malt", "sweetness": "Low", "bitterness": None},
    }
