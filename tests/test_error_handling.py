"""
Error handling and edge case tests for the JSON API.

This test suite covers how failures surface over HTTP:
- Service validation errors (400) with machine-readable codes
- Not found (404) for missing menus and unknown routes
- Duplicate menus (409)
- Request validation failures (422)
- Unexpected errors (500) without leaking internals
"""

from fastapi.testclient import TestClient

from app.exceptions import ConflictError, MenuBotError, NotFoundError, ServiceValidationError
from domain.models import InMemoryDatabase
from main import app
from services.menu_service import MenuService

from test_fixtures import USER_ID, api_db, client, db


# =============================================================================
# EXCEPTION CLASSES
# =============================================================================


def test_exception_defaults_and_payload():
    err = ServiceValidationError(details={"field": "rating"}, code="INVALID_RATING")

    assert err.http_status == 400
    assert str(err) == "Invalid input"
    assert err.to_dict() == {
        "message": "Invalid input",
        "code": "INVALID_RATING",
        "details": {"field": "rating"},
    }
    assert NotFoundError().http_status == 404
    assert ConflictError("dup").to_dict() == {"message": "dup"}
    assert MenuBotError().http_status == 500


# =============================================================================
# HTTP ERROR RESPONSES
# =============================================================================


def test_invalid_recommendation_count_is_400(api_db: InMemoryDatabase):
    MenuService.save_menu(api_db, "김밥", "분식")

    r = client.get(f"/recommendations/{USER_ID}", params={"limit": 0})

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INVALID_COUNT"
    assert "timestamp" in body


def test_blank_menu_name_is_400(api_db: InMemoryDatabase):
    r = client.post("/menus", json={"name": "   "})

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "BLANK_MENU_NAME"


def test_missing_menu_is_404(api_db: InMemoryDatabase):
    r = client.get("/menus/없는메뉴")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "MENU_NOT_FOUND"


def test_unknown_route_is_404():
    r = client.get("/does-not-exist")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_duplicate_menu_is_409(api_db: InMemoryDatabase):
    client.post("/menus", json={"name": "떡볶이", "category": "분식"})

    r = client.post("/menus", json={"name": "떡볶이", "category": "분식"})

    assert r.status_code == 409
    error = r.json()["error"]
    assert error["code"] == "DUPLICATE_MENU"
    assert error["details"] == {"name": "떡볶이"}


def test_request_validation_is_422(api_db: InMemoryDatabase):
    r = client.post("/menus", json={"name": "라면", "spicy_level": 9})

    assert r.status_code == 422
    body = r.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"][0]["loc"][-1] == "spicy_level"


def test_kakao_request_without_user_is_422(api_db: InMemoryDatabase):
    r = client.post("/kakao/record", json={"bot": {"id": "bot-1"}})

    assert r.status_code == 422


def test_unexpected_error_is_500(api_db: InMemoryDatabase, monkeypatch):
    def broken(db):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(MenuService, "get_all_menus", broken)
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.get("/menus")

    assert r.status_code == 500
    body = r.json()
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "secret" not in r.text
