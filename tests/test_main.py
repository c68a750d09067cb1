"""
Tests for application-level endpoints and error rendering.
"""


class TestApp:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Hello From Doctors Portal"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_process_time_header(self, client):
        response = client.get("/health")

        assert "X-Process-Time" in response.headers

    def test_unknown_route(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["path"] == "/nowhere"

    def test_unauthorized_advertises_bearer(self, client):
        response = client.get("/user")

        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_startup_creates_indexes(self, db):
        assert "email_1" in db.users.index_information()
