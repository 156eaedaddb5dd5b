import unittest
from unittest.mock import patch
from fastapi.testclient import TestClient

from main import app
from core.deps import get_storage
from storage.memory import MemStorage
from teammember.schemas import TeamMemberCreate


class TeamMemberRouterTests(unittest.TestCase):
    def setUp(self):
        self.storage = MemStorage()
        app.dependency_overrides[get_storage] = lambda: self.storage
        self.client = TestClient(app)

        self.sarah = self.storage.create_team_member(
            TeamMemberCreate(name="Sarah Chen", position="Security Analyst", email="sarah.chen@vilcomnetworks.com")
        )

    def tearDown(self):
        app.dependency_overrides.pop(get_storage, None)

    # --- LIST ---

    def test_list_team_members_camel_case(self):
        resp = self.client.get("/api/team-members")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), [{
            "id": self.sarah.id,
            "name": "Sarah Chen",
            "position": "Security Analyst",
            "email": "sarah.chen@vilcomnetworks.com",
            "phone": None,
            "avatarUrl": None,
            "status": "active",
            "userId": None,
        }])

    # --- GET /{id} ---

    def test_get_team_member_200(self):
        resp = self.client.get(f"/api/team-members/{self.sarah.id}")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["name"], "Sarah Chen")

    def test_get_team_member_404(self):
        resp = self.client.get("/api/team-members/9999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "Team member not found")

    def test_get_team_member_non_numeric_id_400(self):
        resp = self.client.get("/api/team-members/abc")
        self.assertEqual(resp.status_code, 400)

    # --- CREATE ---

    def test_create_team_member_201(self):
        payload = {
            "name": "David Kim",
            "position": "Incident Responder",
            "email": "david.kim@vilcomnetworks.com",
            "avatarUrl": "",
            "status": "pto",
        }
        resp = self.client.post("/api/team-members", json=payload)
        self.assertEqual(resp.status_code, 201, resp.text)
        body = resp.json()
        self.assertEqual(body["id"], 2)
        self.assertEqual(body["avatarUrl"], "")
        self.assertEqual(body["status"], "pto")

    def test_create_team_member_400_missing_fields(self):
        resp = self.client.post("/api/team-members", json={"name": "Nobody"})
        self.assertEqual(resp.status_code, 400)
        locs = [tuple(e["loc"]) for e in resp.json()["detail"]]
        self.assertIn(("body", "position"), locs)
        self.assertIn(("body", "email"), locs)

    def test_create_team_member_400_unknown_status(self):
        payload = {"name": "X", "position": "Y", "email": "x@vilcomnetworks.com", "status": "vacation"}
        resp = self.client.post("/api/team-members", json=payload)
        self.assertEqual(resp.status_code, 400)

    def test_create_team_member_409_duplicate_email(self):
        payload = {"name": "Copy", "position": "Y", "email": "sarah.chen@vilcomnetworks.com"}
        resp = self.client.post("/api/team-members", json=payload)
        self.assertEqual(resp.status_code, 409, resp.text)
        self.assertEqual(
            resp.json()["detail"],
            "a team member with email 'sarah.chen@vilcomnetworks.com' already exists",
        )

    def test_create_team_member_with_unlinked_user_id(self):
        payload = {"name": "New", "position": "Y", "email": "new@vilcomnetworks.com", "userId": 99}
        resp = self.client.post("/api/team-members", json=payload)
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json()["userId"], 99)

    # --- PATCH ---

    def test_patch_team_member_200(self):
        resp = self.client.patch(f"/api/team-members/{self.sarah.id}", json={"status": "pto_soon"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["status"], "pto_soon")
        self.assertEqual(resp.json()["name"], "Sarah Chen")

    def test_patch_team_member_404(self):
        resp = self.client.patch("/api/team-members/9999", json={"name": "X"})
        self.assertEqual(resp.status_code, 404)

    def test_patch_team_member_400_empty_body(self):
        resp = self.client.patch(f"/api/team-members/{self.sarah.id}", json={})
        self.assertEqual(resp.status_code, 400)

    # --- DELETE ---

    def test_delete_team_member_204(self):
        resp = self.client.delete(f"/api/team-members/{self.sarah.id}")
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(resp.content, b"")
        self.assertEqual(self.client.get(f"/api/team-members/{self.sarah.id}").status_code, 404)

    def test_delete_team_member_404(self):
        resp = self.client.delete("/api/team-members/9999")
        self.assertEqual(resp.status_code, 404)

    # --- 500 ---

    def test_unexpected_error_is_500_without_details(self):
        client = TestClient(app, raise_server_exceptions=False)
        with patch.object(self.storage, "list_team_members", side_effect=RuntimeError("db exploded")):
            resp = client.get("/api/team-members")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"detail": "Internal server error"})
        self.assertNotIn("exploded", resp.text)


if __name__ == "__main__":
    unittest.main()
