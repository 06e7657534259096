import json
from dataclasses import dataclass
from urllib.parse import urlencode

import pytest

from carpool.api import app as api
from carpool.container import build_container
from carpool.shared.config import Settings


@dataclass
class FakeLambdaContext:
    function_name: str = "carpool-api"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 256
    invoked_function_arn: str = "arn:aws:lambda:eu-west-3:123456789012:function:carpool-api"
    aws_request_id: str = "req-123"


def _http_event(method: str, path: str, body=None, token=None, query=None) -> dict:
    """API Gateway HTTP API（ペイロード v2）のイベントを生成する"""
    headers = {"content-type": "application/json"}
    if token:
        headers["authorization"] = f"Bearer {token}"
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": urlencode(query or {}),
        "headers": headers,
        "queryStringParameters": query,
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "api-id",
            "domainName": "api.carpool.local",
            "http": {
                "method": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "pytest",
            },
            "requestId": "req-123",
            "routeKey": "$default",
            "stage": "$default",
            "time": "01/Jun/2025:09:00:00 +0000",
            "timeEpoch": 1748768400000,
        },
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def call_api(monkeypatch):
    """インメモリ SQLite のコンテナで Lambda Handler を呼び出す Factory fixture"""
    settings = Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        password_hash_rounds=4,
        email_enabled=False,
        redis_url=None,
    )
    container = build_container(settings)
    monkeypatch.setattr("carpool.api.dependencies.get_container", lambda: container)

    def _call(method: str, path: str, body=None, token=None, query=None):
        response = api.lambda_handler(
            _http_event(method, path, body, token, query), FakeLambdaContext()
        )
        return response["statusCode"], json.loads(response["body"])

    yield _call
    container.engine.dispose()


@pytest.fixture
def register(call_api):
    """ユーザーを登録してトークンを返す Factory fixture"""

    def _factory(email: str, password: str = "secret123") -> str:
        status, body = call_api(
            "POST",
            "/v1/auth/register",
            {"email": email, "password": password, "firstName": "Test"},
        )
        assert status == 201
        return body["data"]["token"]

    return _factory


@pytest.fixture
def published_travel(call_api, register):
    """運転者・車両を用意し、座席 1 の旅程を作成して ID を返す"""
    driver = register("driver@example.com")
    status, _ = call_api("POST", "/v1/drivers", {"driverLicense": "B-123456"}, driver)
    assert status == 201
    _, brand = call_api("POST", "/v1/brands", {"name": "Renault"}, driver)
    _, car = call_api(
        "POST",
        "/v1/cars",
        {"licensePlate": "AB-123-CD", "brandId": brand["data"]["id"], "model": "Clio"},
        driver,
    )
    status, travel = call_api(
        "POST",
        "/v1/travels",
        {
            "date": "2026-11-02T08:30:00Z",
            "kms": 465,
            "seats": 1,
            "carId": car["data"]["id"],
            "departureCity": "Paris",
            "arrivalCity": "Lyon",
        },
        driver,
    )
    assert status == 201
    return travel["data"]["id"]


class TestLambdaHandler:
    """Lambda Handler（HTTP API）のテスト"""

    def test_health(self, call_api):
        """DB とキャッシュが利用可能なら 200"""

        # Act
        status, body = call_api("GET", "/v1/health")

        # Assert
        assert status == 200
        assert body["data"] == {"status": "ok", "database": True, "cache": True}

    def test_register_then_login(self, call_api, register):
        """登録したユーザーでログインでき、誤ったパスワードは 401"""

        # Arrange
        register("alice@example.com")

        # Act
        ok_status, ok_body = call_api(
            "POST", "/v1/auth/login", {"email": "alice@example.com", "password": "secret123"}
        )
        ng_status, ng_body = call_api(
            "POST", "/v1/auth/login", {"email": "alice@example.com", "password": "wrong-pass"}
        )

        # Assert
        assert ok_status == 200
        assert ok_body["data"]["token"]
        assert ng_status == 401
        assert ng_body["error"]["code"] == "INVALID_CREDENTIALS"

    def test_duplicate_registration(self, call_api, register):
        """登録済みのメールアドレスは 409"""

        # Arrange
        register("alice@example.com")

        # Act
        status, body = call_api(
            "POST", "/v1/auth/register", {"email": "alice@example.com", "password": "secret123"}
        )

        # Assert
        assert status == 409
        assert body["error"]["code"] == "USER_ALREADY_EXISTS"

    def test_invalid_body_is_422(self, call_api):
        """リクエストボディの検証エラーは 422 VALIDATION_ERROR"""

        # Act
        status, body = call_api(
            "POST", "/v1/auth/register", {"email": "not-an-email", "password": "x"}
        )

        # Assert
        assert status == 422
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"

    def test_missing_token_is_401(self, call_api):
        """認証が必要なルートにトークンがなければ 401"""

        # Act
        status, body = call_api("POST", "/v1/inscriptions", {"tripId": "trip-1"})

        # Assert
        assert status == 401
        assert body["error"]["code"] == "UNAUTHORIZED"

    def test_invalid_token_is_401(self, call_api):
        """検証できないトークンは 401"""

        # Act
        status, _ = call_api("GET", "/v1/inscriptions/me", token="not-a-jwt")

        # Assert
        assert status == 401

    def test_unknown_route_is_404(self, call_api):
        """存在しないルートは 404 ROUTE_NOT_FOUND"""

        # Act
        status, body = call_api("GET", "/v1/unknown")

        # Assert
        assert status == 404
        assert body["error"]["code"] == "ROUTE_NOT_FOUND"

    def test_empty_color_listing(self, call_api):
        """色が 0 件の一覧は空配列と既定のページング情報"""

        # Act
        status, body = call_api("GET", "/v1/colors")

        # Assert
        assert status == 200
        assert body == {
            "success": True,
            "data": [],
            "meta": {"page": 1, "limit": 20, "total": 0, "totalPages": 0},
        }

    def test_booking_flow(self, call_api, register, published_travel):
        """座席 1 の旅程: 1 人目は予約でき、二重予約は 409、2 人目は 400"""

        # Arrange
        alice = register("alice@example.com")
        bob = register("bob@example.com")

        # Act
        first_status, first = call_api(
            "POST", "/v1/inscriptions", {"tripId": published_travel}, alice
        )
        again_status, again = call_api(
            "POST", "/v1/inscriptions", {"tripId": published_travel}, alice
        )
        full_status, full = call_api(
            "POST", "/v1/inscriptions", {"tripId": published_travel}, bob
        )
        _, passengers = call_api(
            "GET", f"/v1/travels/{published_travel}/passengers", token=alice
        )

        # Assert
        assert first_status == 201
        assert first["data"]["travel_id"] == published_travel
        assert again_status == 409
        assert again["error"]["code"] == "ALREADY_INSCRIBED"
        assert full_status == 400
        assert full["error"]["code"] == "NO_SEATS_AVAILABLE"
        assert [p["id"] for p in passengers["data"]] == [first["data"]["id"]]
        assert passengers["meta"]["total"] == 1

    def test_cancel_frees_the_seat(self, call_api, register, published_travel):
        """予約を取り消すと別のユーザーが予約できる"""

        # Arrange
        alice = register("alice@example.com")
        bob = register("bob@example.com")
        _, booked = call_api("POST", "/v1/inscriptions", {"tripId": published_travel}, alice)

        # Act
        forbidden_status, _ = call_api(
            "DELETE", f"/v1/inscriptions/{booked['data']['id']}", token=bob
        )
        cancel_status, _ = call_api(
            "DELETE", f"/v1/inscriptions/{booked['data']['id']}", token=alice
        )
        rebook_status, _ = call_api(
            "POST", "/v1/inscriptions", {"tripId": published_travel}, bob
        )

        # Assert
        assert forbidden_status == 403
        assert cancel_status == 200
        assert rebook_status == 201

    def test_search_by_city(self, call_api, published_travel):
        """出発地・到着地で旅程を検索できる"""

        # Act
        status, body = call_api(
            "GET",
            "/v1/travels/search",
            query={"departureCity": "Paris", "arrivalCity": "Lyon", "date": "2026-11-02"},
        )

        # Assert
        assert status == 200
        assert [t["id"] for t in body["data"]] == [published_travel]
        assert body["data"][0]["departure_city"] == "Paris"
