"""
Account approval and removal tests
"""
from recruitment.models import RoleName, User, UserStatus

from conftest import TEST_PASSWORD, UserFactory


class TestApproval:

    def test_pending_users_listed(self, client, admin, auth_headers):
        pending = UserFactory(role=RoleName.HR, status=UserStatus.PENDING_APPROVAL.value)
        UserFactory(role=RoleName.HR)

        response = client.get("/api/admin/pending-users", headers=auth_headers(admin))

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [pending.id]

    def test_approve_then_login(self, client, admin, auth_headers):
        pending = UserFactory(
            username="newhr", role=RoleName.HR, status=UserStatus.PENDING_APPROVAL.value
        )

        response = client.post(
            "/api/admin/approve-user",
            json={"userId": pending.id, "action": "approve"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 200
        assert response.json()["message"] == "User approved successfully"
        assert response.json()["user"]["status"] == UserStatus.ACTIVE.value

        login = client.post("/api/auth/login", json={"username": "newhr", "password": TEST_PASSWORD})
        assert login.status_code == 200

    def test_reject(self, client, admin, auth_headers):
        pending = UserFactory(role=RoleName.INTERVIEWER, status=UserStatus.PENDING_APPROVAL.value)

        response = client.post(
            "/api/admin/approve-user",
            json={"userId": pending.id, "action": "Reject"},
            headers=auth_headers(admin),
        )

        assert response.json()["message"] == "User rejected"
        assert response.json()["user"]["status"] == UserStatus.REJECTED.value

    def test_unknown_action(self, client, admin, auth_headers):
        pending = UserFactory(status=UserStatus.PENDING_APPROVAL.value)

        response = client.post(
            "/api/admin/approve-user",
            json={"userId": pending.id, "action": "promote"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid action. Use 'approve' or 'reject'"

    def test_only_pending_users_can_be_decided(self, client, admin, auth_headers):
        active = UserFactory()

        response = client.post(
            "/api/admin/approve-user",
            json={"userId": active.id, "action": "reject"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "User is not pending approval"

    def test_admin_only(self, client, hr, auth_headers):
        assert client.get("/api/admin/all-users", headers=auth_headers(hr)).status_code == 403


class TestDeleteUser:

    def test_delete_user(self, client, db, admin, auth_headers):
        victim = UserFactory(role=RoleName.REVIEWER)

        response = client.delete(f"/api/admin/user/{victim.id}", headers=auth_headers(admin))

        assert response.status_code == 200
        assert response.json()["message"] == "User deleted successfully"
        assert db.get(User, victim.id) is None

    def test_admins_cannot_be_deleted(self, client, db, admin, auth_headers):
        other_admin = UserFactory(role=RoleName.ADMIN)

        response = client.delete(f"/api/admin/user/{other_admin.id}", headers=auth_headers(admin))

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot delete admin users"
        assert db.get(User, other_admin.id) is not None

    def test_delete_missing_user(self, client, admin, auth_headers):
        assert client.delete("/api/admin/user/999", headers=auth_headers(admin)).status_code == 404

    def test_interviewer_directory(self, client, admin, interviewer, auth_headers):
        UserFactory(role=RoleName.INTERVIEWER, status=UserStatus.PENDING_APPROVAL.value)

        response = client.get("/api/users/interviewers", headers=auth_headers(admin))

        assert [u["id"] for u in response.json()] == [interviewer.id]
