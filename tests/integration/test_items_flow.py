import h11
import pytest
from fastapi.testclient import TestClient

from apps.items_api import ItemsService
from apps.items_api.main import app as items_app, create_app

client = TestClient(items_app)

EXPECTED_ITEMS = [
    {"id": 1, "name": "Buy groceries"},
    {"id": 2, "name": "Finish SvelteKit project"},
    {"id": 3, "name": "Walk the dog"},
]


def test_get_items_returns_fixed_items_and_url():
    response = client.get("/api/v1/items")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 4
    assert body[:3] == EXPECTED_ITEMS
    assert body[3] == {"url": "http://testserver/api/v1/items"}


def test_content_type_is_json():
    response = client.get("/api/v1/items")
    assert "application/json" in response.headers["content-type"]


def test_content_type_is_sent_exactly():
    response = client.get("/api/v1/items")
    content_types = [v for k, v in response.headers.multi_items() if k == "content-type"]
    assert content_types == ["application/json"]


@pytest.mark.parametrize("path", ["/api/v1/items?x=1", "/health"])
def test_response_headers_are_valid_on_the_wire(path):
    response = client.get(path)
    # h11 is the HTTP/1.1 backend uvicorn serves with by default.
    h11.Response(status_code=response.status_code, headers=response.headers.raw)


def test_concrete_scenario_is_byte_exact():
    response = client.get("https://example.com/api/v1/items?x=1")
    assert response.status_code == 200
    assert response.content == (
        b'[{"id":1,"name":"Buy groceries"},'
        b'{"id":2,"name":"Finish SvelteKit project"},'
        b'{"id":3,"name":"Walk the dog"},'
        b'{"url":"https://example.com/api/v1/items?x=1"}]'
    )


def test_repeated_requests_are_identical():
    first = client.get("/api/v1/items?page=2&q=dog")
    second = client.get("/api/v1/items?page=2&q=dog")
    assert first.content == second.content
    assert first.json()[3] == {"url": "http://testserver/api/v1/items?page=2&q=dog"}


def test_post_is_not_routed():
    response = client.post("/api/v1/items", json={})
    assert response.status_code == 405


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "items_api"}


def test_custom_route_path():
    service = ItemsService(config={"items_api": {"route": {"path": "/todos"}}})
    custom = TestClient(create_app(service))
    response = custom.get("/todos")
    assert response.status_code == 200
    assert response.json()[3] == {"url": "http://testserver/todos"}
    assert custom.get("/api/v1/items").status_code == 404
