"""The assembled application: middleware, CORS, health and error envelopes."""

from storefront.api.errors import error_response


class TestHealth:
    def test_health(self, app_client):
        response = app_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": {"name": "storefront"}}


class TestRequestContext:
    def test_request_id_is_generated(self, app_client):
        response = app_client.get("/health")
        assert response.headers["X-Request-ID"]

    def test_request_id_is_propagated(self, app_client):
        response = app_client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"


class TestCors:
    def test_default_origin_is_allowed(self, app_client):
        response = app_client.options(
            "/products",
            headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_total_count_header_is_exposed(self, app_client):
        response = app_client.get("/products", headers={"Origin": "http://localhost:3000"})
        assert response.headers["X-Total-Count"] == "0"
        assert "X-Total-Count" in response.headers["access-control-expose-headers"]


class TestRoutesThroughApp:
    def test_register_and_login(self, app_client):
        response = app_client.post("/register", json={"email": "jane@example.com", "password": "s3cret-pass"})
        assert response.status_code == 201

        response = app_client.post("/login", json={"email": "jane@example.com", "password": "s3cret-pass"})
        assert response.status_code == 200
        assert response.json()["token"]

    def test_not_found_envelope(self, app_client):
        response = app_client.get("/profile/missing")
        assert response.status_code == 404
        assert response.json()["status"] == "fail"

    def test_unknown_route(self, app_client):
        response = app_client.get("/nowhere")
        assert response.status_code == 404
        assert response.json() == {"status": "fail", "error": "Not Found"}


class TestErrorResponse:
    def test_client_errors_fail(self):
        response = error_response(400, {"name": ["is required"]})
        assert response.status_code == 400
        assert response.body == b'{"status":"fail","error":{"name":["is required"]}}'

    def test_server_errors_error(self):
        response = error_response(500, "Internal server error")
        assert response.body == b'{"status":"error","error":"Internal server error"}'
