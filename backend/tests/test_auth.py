"""
Registration, login and role gate tests
"""
import pytest

from recruitment.auth.service import status_for_roles
from recruitment.models import RoleName, UserStatus

from conftest import TEST_PASSWORD, UserFactory


class TestRegistration:

    def test_candidate_registration_is_active(self, client):
        response = client.post("/api/auth/register", json={
            "fullName": "New Candidate",
            "email": "new@example.com",
            "username": "newcandidate",
            "password": "secret1",
            "roles": ["Candidate"],
        })

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["user"]["status"] == UserStatus.ACTIVE.value
        assert body["user"]["roles"] == ["Candidate"]

    def test_staff_registration_waits_for_approval(self, client):
        response = client.post("/api/auth/register", json={
            "fullName": "New Recruiter",
            "email": "rec@example.com",
            "username": "newrecruiter",
            "password": "secret1",
            "roles": ["Recruiter", "Recruiter"],
        })

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["status"] == UserStatus.PENDING_APPROVAL.value
        assert body["user"]["roles"] == ["Recruiter"]
        assert "pending admin approval" in body["message"]

    def test_duplicate_username_is_rejected(self, client, db):
        UserFactory(username="taken")

        response = client.post("/api/auth/register", json={
            "fullName": "Someone",
            "email": "someone@example.com",
            "username": "taken",
            "password": "secret1",
            "roles": ["Candidate"],
        })

        assert response.status_code == 400
        assert response.json()["message"] == "Username already exists"
        assert response.json()["details"] == {"field": "username"}

    def test_unknown_role_is_a_bad_request(self, client):
        response = client.post("/api/auth/register", json={
            "fullName": "Someone",
            "email": "someone@example.com",
            "username": "someone",
            "password": "secret1",
            "roles": ["Superuser"],
        })

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"

    @pytest.mark.parametrize("roles,expected", [
        (["Candidate"], UserStatus.ACTIVE),
        (["Candidate", "HR"], UserStatus.PENDING_APPROVAL),
        (["Admin"], UserStatus.PENDING_APPROVAL),
    ])
    def test_status_for_roles(self, roles, expected):
        assert status_for_roles(roles) == expected


class TestLogin:

    def test_login_returns_token(self, client, db):
        user = UserFactory(username="alice", role=RoleName.HR)

        response = client.post("/api/auth/login", json={"username": "alice", "password": TEST_PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["user"]["id"] == user.id

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.status_code == 200
        assert me.json()["username"] == "alice"

    def test_wrong_password(self, client, db):
        UserFactory(username="alice")

        response = client.post("/api/auth/login", json={"username": "alice", "password": "nope"})

        assert response.status_code == 401

    def test_pending_user_cannot_log_in(self, client, db):
        UserFactory(username="pending", status=UserStatus.PENDING_APPROVAL.value, role=RoleName.HR)

        response = client.post("/api/auth/login", json={"username": "pending", "password": TEST_PASSWORD})

        assert response.status_code == 401
        assert response.json()["details"]["status"] == UserStatus.PENDING_APPROVAL.value


class TestRoleGates:

    def test_missing_token(self, client):
        assert client.get("/api/jobs").status_code == 401

    def test_garbage_token(self, client):
        response = client.get("/api/jobs", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_candidate_cannot_list_staff_jobs(self, client, candidate, auth_headers):
        response = client.get("/api/jobs", headers=auth_headers(candidate.user))

        assert response.status_code == 403
        assert response.json()["details"]["user_roles"] == ["Candidate"]

    def test_staff_cannot_use_candidate_surface(self, client, recruiter, auth_headers):
        response = client.get("/api/candidate/jobs", headers=auth_headers(recruiter))
        assert response.status_code == 403

    def test_suspended_user_token_is_refused(self, client, db, auth_headers):
        user = UserFactory(role=RoleName.RECRUITER)
        headers = auth_headers(user)
        user.status = UserStatus.SUSPENDED.value
        db.commit()

        assert client.get("/api/jobs", headers=headers).status_code == 401

    def test_principal_carries_roles(self, db, principal_for):
        user = UserFactory(role=RoleName.REVIEWER)

        principal = principal_for(user)

        assert principal.user_id == user.id
        assert principal.has_role(RoleName.REVIEWER)
        assert not principal.has_role(RoleName.ADMIN, RoleName.HR)
