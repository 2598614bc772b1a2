"""API tests for login, check-auth, logout and the cookie-gated dashboard feed."""

import unittest
from datetime import datetime, timedelta
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ems_api.core.config import Settings
from ems_api.core.database import get_db
from ems_api.core.security import issue_session_token
from ems_api.main import create_app
from ems_api.models import Base, EnergyReport, User

SECRET = "api-test-secret"


def _settings(**overrides: object) -> Settings:
    values = {
        "APP_ENV": "dev",
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": SECRET,
    }
    values.update(overrides)
    return Settings(**values)


def _seeded_session_factory() -> sessionmaker:
    """In-memory SQLite with one user and two readings."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autoflush=False)
    with factory() as db:
        db.add(User(user_id=1, user_name="operator", password="pa55word", role="admin"))
        db.add(EnergyReport(meter_no=5, machine_name="Press", reading_date=datetime(2025, 1, 2)))
        db.add(EnergyReport(meter_no=6, machine_name="Lathe", reading_date=datetime(2025, 1, 1)))
        db.commit()
    return factory


def _client(settings: Settings | None = None, db: object | None = None) -> TestClient:
    app = create_app(settings or _settings())
    if db is not None:
        app.dependency_overrides[get_db] = lambda: db
    else:
        factory = _seeded_session_factory()

        def _get_db():
            session = factory()
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_db] = _get_db
    return TestClient(app)


def _login(client: TestClient, user_name: object = "operator", password: object = "pa55word"):
    return client.post("/api/login", json={"user_name": user_name, "password": password})


class TestLogin(unittest.TestCase):
    def test_valid_credentials_set_cookie_and_return_user(self) -> None:
        client = _client()
        resp = _login(client)
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["message"], "Login successful")
        self.assertEqual(body["user"], {"user_id": 1, "user_name": "operator", "role": "admin"})
        self.assertIn("auth_token", resp.cookies)
        set_cookie = resp.headers["set-cookie"].lower()
        self.assertIn("httponly", set_cookie)
        self.assertIn("max-age=3600", set_cookie)
        self.assertIn("path=/", set_cookie)
        self.assertIn("samesite=lax", set_cookie)
        self.assertNotIn("secure", set_cookie)

    def test_wrong_password_is_401_without_cookie(self) -> None:
        client = _client()
        resp = _login(client, password="nope")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid credentials"})
        self.assertNotIn("set-cookie", resp.headers)

    def test_unknown_user_is_401(self) -> None:
        resp = _login(_client(), user_name="ghost")
        self.assertEqual(resp.status_code, 401)

    def test_missing_fields_is_400_before_store_access(self) -> None:
        db = MagicMock()
        client = _client(db=db)
        for payload in ({"user_name": "operator"}, {"password": "x"}, {"user_name": "", "password": "x"}, {}):
            resp = client.post("/api/login", json=payload)
            self.assertEqual(resp.status_code, 400, payload)
            self.assertEqual(resp.json(), {"message": "All fields are required!"})
        resp = client.post("/api/login")
        self.assertEqual(resp.status_code, 400)
        db.query.assert_not_called()
        db.execute.assert_not_called()

    def test_unparseable_body_is_400_before_store_access(self) -> None:
        db = MagicMock()
        client = _client(db=db)
        form = client.post("/api/login", data={"user_name": "operator", "password": "pa55word"})
        malformed = client.post(
            "/api/login",
            content=b"{bad",
            headers={"content-type": "application/json"},
        )
        not_an_object = client.post("/api/login", json=["operator", "pa55word"])
        nested = client.post("/api/login", json={"user_name": {"$ne": ""}, "password": "x"})
        for resp in (form, malformed, not_an_object, nested):
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.json(), {"message": "All fields are required!"})
        db.query.assert_not_called()

    def test_numeric_credentials_are_looked_up_as_text(self) -> None:
        client = _client()
        resp = client.post("/api/login", json={"user_name": 123, "password": 456})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid credentials"})

    def test_numeric_credentials_reach_the_store_as_strings(self) -> None:
        with patch("ems_api.api.routes.auth.find_user_by_credentials", return_value=None) as find:
            resp = _login(_client(db=MagicMock()), user_name=123, password=456)
        self.assertEqual(resp.status_code, 401)
        _, user_name, password = find.call_args.args
        self.assertEqual((user_name, password), ("123", "456"))

    def test_store_failure_is_500_with_message(self) -> None:
        db = MagicMock()
        db.query.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
        resp = _login(_client(db=db))
        self.assertEqual(resp.status_code, 500)
        body = resp.json()
        self.assertEqual(body["message"], "Internal server error")
        self.assertIn("connection lost", body["error"])

    def test_production_cookie_is_secure_and_cross_site(self) -> None:
        client = _client(settings=_settings(APP_ENV="prod"))
        resp = _login(client)
        self.assertEqual(resp.status_code, 200)
        set_cookie = resp.headers["set-cookie"].lower()
        self.assertIn("secure", set_cookie)
        self.assertIn("samesite=none", set_cookie)
        self.assertIn("httponly", set_cookie)


class TestCheckAuth(unittest.TestCase):
    def test_after_login_returns_claims(self) -> None:
        client = _client()
        _login(client)
        resp = client.get("/api/check-auth")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["authenticated"])
        self.assertEqual(body["user"]["user_id"], 1)
        self.assertEqual(body["user"]["user_name"], "operator")
        self.assertEqual(body["user"]["role"], "admin")
        self.assertEqual(body["user"]["exp"] - body["user"]["iat"], 3600)

    def test_without_cookie(self) -> None:
        resp = _client().get("/api/check-auth")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"authenticated": False})

    def test_expired_token(self) -> None:
        client = _client()
        claims = {"user_id": 1, "user_name": "operator", "role": "admin"}
        client.cookies.set("auth_token", issue_session_token(claims, SECRET, timedelta(seconds=-1)))
        resp = client.get("/api/check-auth")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"authenticated": False})

    def test_null_claim_is_echoed(self) -> None:
        client = _client()
        claims = {"user_id": 2, "user_name": "viewer", "role": None}
        client.cookies.set("auth_token", issue_session_token(claims, SECRET, timedelta(hours=1)))
        body = client.get("/api/check-auth").json()
        self.assertTrue(body["authenticated"])
        self.assertIn("role", body["user"])
        self.assertIsNone(body["user"]["role"])

    def test_token_signed_with_other_secret(self) -> None:
        client = _client()
        claims = {"user_id": 1, "user_name": "operator", "role": "admin"}
        client.cookies.set("auth_token", issue_session_token(claims, "other", timedelta(hours=1)))
        self.assertEqual(client.get("/api/check-auth").json(), {"authenticated": False})


class TestLogout(unittest.TestCase):
    def test_logout_then_check_auth(self) -> None:
        client = _client()
        _login(client)
        self.assertTrue(client.get("/api/check-auth").json()["authenticated"])
        resp = client.post("/api/logout")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True, "message": "Logged out successfully"})
        set_cookie = resp.headers["set-cookie"].lower()
        self.assertIn("auth_token=", set_cookie)
        self.assertIn("max-age=0", set_cookie)
        self.assertIn("httponly", set_cookie)
        self.assertIn("samesite=lax", set_cookie)
        self.assertEqual(client.get("/api/check-auth").json(), {"authenticated": False})

    def test_logout_is_idempotent(self) -> None:
        client = _client()
        first = client.post("/api/logout")
        second = client.post("/api/logout")
        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.json(), second.json())


class TestDashboardData(unittest.TestCase):
    def test_requires_cookie(self) -> None:
        resp = _client().get("/api/ems-dashboard/data")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Not authenticated"})

    def test_rejects_tampered_token(self) -> None:
        client = _client()
        client.cookies.set("auth_token", "eyJhbGciOiJIUzI1NiJ9.e30.bad-signature")
        resp = client.get("/api/ems-dashboard/data")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid or expired token"})

    def test_rejects_expired_token(self) -> None:
        client = _client()
        claims = {"user_id": 1, "user_name": "operator", "role": "admin"}
        client.cookies.set("auth_token", issue_session_token(claims, SECRET, timedelta(seconds=-1)))
        resp = client.get("/api/ems-dashboard/data")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid or expired token"})

    def test_returns_rows_oldest_first(self) -> None:
        client = _client()
        _login(client)
        resp = client.get("/api/ems-dashboard/data")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["count"], 2)
        self.assertEqual([r["machine_name"] for r in body["data"]], ["Lathe", "Press"])
        self.assertIn("kwh", body["data"][0])

    def test_store_failure_is_500(self) -> None:
        db = MagicMock()
        db.execute.side_effect = OperationalError("SELECT", {}, Exception("db down"))
        client = _client(db=db)
        claims = {"user_id": 1, "user_name": "operator", "role": "admin"}
        client.cookies.set("auth_token", issue_session_token(claims, SECRET, timedelta(hours=1)))
        resp = client.get("/api/ems-dashboard/data")
        self.assertEqual(resp.status_code, 500)
        body = resp.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["message"], "Database query error")
        self.assertIn("db down", body["error"])


class TestCors(unittest.TestCase):
    """Only the configured origin may call with credentials."""

    def test_configured_origin_allowed(self) -> None:
        resp = _client().options(
            "/api/login",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["access-control-allow-origin"], "http://localhost:3000")
        self.assertEqual(resp.headers["access-control-allow-credentials"], "true")

    def test_other_origin_rejected(self) -> None:
        resp = _client().options(
            "/api/login",
            headers={
                "Origin": "http://evil.example",
                "Access-Control-Request-Method": "POST",
            },
        )
        self.assertEqual(resp.status_code, 400)
        self.assertNotIn("access-control-allow-origin", resp.headers)


if __name__ == "__main__":
    unittest.main()
