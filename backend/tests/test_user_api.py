from __future__ import annotations

import unittest

from tests._bootstrap import bootstrap_backend_imports, reset_caches
from tests._db import make_session_factory


bootstrap_backend_imports()
reset_caches()

from fastapi.testclient import TestClient  # noqa: E402

from hueprint.database import get_db  # noqa: E402
from hueprint.main import create_app  # noqa: E402


class UserApiTests(unittest.TestCase):
    def setUp(self) -> None:
        factory = make_session_factory()

        def _get_db():
            db = factory()
            try:
                yield db
            finally:
                db.close()

        app = create_app()
        app.dependency_overrides[get_db] = _get_db
        self.client = TestClient(app)

    def _create(self, **payload) -> dict:
        resp = self.client.post("/api/users", json=payload)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["data"]

    def test_health(self) -> None:
        resp = self.client.get("/health")
        self.assertEqual(resp.json()["data"]["status"], "ok")

    def test_create_and_get(self) -> None:
        created = self._create(email="john@example.com", name="John Smith")
        self.assertEqual(created["avatarHue"], 210)
        self.assertEqual(created["initials"], "JS")
        self.assertEqual(created["avatarPattern"], created["id"])

        resp = self.client.get(f"/api/users/{created['id']}")
        self.assertEqual(resp.json()["data"]["email"], "john@example.com")

        listed = self.client.get("/api/users").json()["data"]
        self.assertEqual([u["id"] for u in listed], [created["id"]])

    def test_second_user_gets_opposite_hue(self) -> None:
        self._create(email="john@example.com", name="John Smith")
        jane = self._create(email="jane@example.com", name="Jane Doe")
        self.assertEqual(jane["avatarHue"], 30)

    def test_out_of_range_hue_is_rejected(self) -> None:
        resp = self.client.post("/api/users", json={"email": "x@example.com", "avatarHue": 360})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["code"], 42200)

    def test_update_and_delete(self) -> None:
        created = self._create(email="john@example.com", name="John Smith")
        resp = self.client.put(f"/api/users/{created['id']}", json={"avatarHue": 100, "initials": "JO"})
        data = resp.json()["data"]
        self.assertEqual((data["avatarHue"], data["initials"]), (100, "JO"))
        self.assertEqual(data["avatarPattern"], created["avatarPattern"])

        resp = self.client.delete(f"/api/users/{created['id']}")
        self.assertTrue(resp.json()["success"])
        resp = self.client.get(f"/api/users/{created['id']}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["code"], 40400)

    def test_colors(self) -> None:
        created = self._create(email="john@example.com", avatarHue=240)
        data = self.client.get(f"/api/users/{created['id']}/colors").json()["data"]
        self.assertEqual(data["background"], "hsl(240, 65%, 45%)")
        self.assertEqual(data["lightBackground"], "hsl(240, 70%, 90%)")
        self.assertEqual(data["accentText"], "hsl(240, 70%, 30%)")
        self.assertEqual(data["contrastText"], "light")
        self.assertEqual(data["contrastTextColor"], "#FFFFFF")

    def test_avatar_svg(self) -> None:
        created = self._create(email="john@example.com", name="John Smith")
        url = f"/api/users/{created['id']}/avatar.svg"
        first = self.client.get(url, params={"size": "lg"})
        second = self.client.get(url, params={"size": "lg"})
        self.assertEqual(first.status_code, 200)
        self.assertTrue(first.headers["content-type"].startswith("image/svg+xml"))
        self.assertEqual(first.content, second.content)
        self.assertIn('width="48"', first.text)

        badge = self.client.get(url, params={"style": "initials"})
        self.assertIn(">JS</text>", badge.text)

    def test_avatar_bad_size(self) -> None:
        created = self._create(email="john@example.com")
        resp = self.client.get(f"/api/users/{created['id']}/avatar.svg", params={"size": "0"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["code"], 40002)

    def test_match(self) -> None:
        john = self._create(email="john@example.com", name="John Smith")
        self._create(email="jane@example.com", name="Jane Doe")
        self.assertEqual(self.client.get("/api/users/match", params={"q": "JS"}).json()["data"]["id"], john["id"])
        self.assertEqual(self.client.get("/api/users/match", params={"q": "john"}).json()["data"]["id"], john["id"])
        self.assertIsNone(self.client.get("/api/users/match", params={"q": "xy"}).json()["data"])

    def test_identity_preview_endpoints(self) -> None:
        resp = self.client.get("/api/identity/preview.svg", params={"seed": "abc", "hue": 10, "size": "md"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn('width="32"', resp.text)

        resp = self.client.get("/api/identity/initials", params={"name": "田中太郎"})
        self.assertEqual(resp.json()["data"]["initials"], "田中")

    def test_request_id_header_is_echoed(self) -> None:
        resp = self.client.get("/health", headers={"x-request-id": "abc123"})
        self.assertEqual(resp.headers["x-request-id"], "abc123")
