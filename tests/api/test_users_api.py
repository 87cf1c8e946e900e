"""API tests for user endpoints.

Tests cover:
- GET /api/v1/users/me and /users/me/permissions
- PATCH /api/v1/users/permissions (delegation, grant_permissions) status mapping
- GET /api/v1/users (view_users)
- GET /api/v1/users/{id}/permissions (view_users)
- PATCH /api/v1/users/{id}/status (edit_users, read from the store)
- GET /api/v1/permissions

Architecture:
- Real app with dependency overrides (see conftest)
- Real handlers and guard, in-memory repositories
"""

import pytest

from tests.api.conftest import (
    ADMIN_ID,
    ADMIN_NO,
    MANAGER_ID,
    MANAGER_NO,
    PENDING_ID,
    PENDING_NO,
    SYSADMIN_ID,
    SYSADMIN_NO,
)

PERMISSIONS_URL = "/api/v1/users/permissions"


@pytest.mark.api
class TestCurrentUser:
    """Tests for /users/me endpoints."""

    def test_me_returns_identity_without_hash(self, client, auth_headers):
        response = client.get("/api/v1/users/me", headers=auth_headers(MANAGER_ID))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == MANAGER_ID
        assert data["mobile_no"] == MANAGER_NO
        assert data["permissions"] == ["edit_users", "grant_permissions", "view_users"]
        assert "password_hash" not in data

    def test_me_requires_token(self, client):
        response = client.get("/api/v1/users/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_my_permissions_come_from_store(self, client, auth_headers):
        response = client.get(
            "/api/v1/users/me/permissions",
            headers=auth_headers(SYSADMIN_ID, permissions={"*"}),
        )

        assert response.status_code == 200
        assert response.json() == {"userId": SYSADMIN_ID, "permissions": ["edit_systems"]}


@pytest.mark.api
class TestDelegation:
    """Tests for PATCH /users/permissions."""

    def test_wildcard_holder_grants(self, client, auth_headers, user_repo):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(ADMIN_ID),
            json={
                "targetIdentifier": SYSADMIN_NO,
                "permissionsToKeep": ["view_faults", "edit_systems"],
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "targetIdentifier": SYSADMIN_NO,
            "permissions": ["edit_systems", "view_faults"],
        }
        assert user_repo.get(SYSADMIN_ID).permissions == frozenset(
            {"edit_systems", "view_faults"}
        )

    def test_full_replace_discards_prior_permissions(
        self, client, auth_headers, user_repo
    ):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(MANAGER_ID),
            json={"targetIdentifier": PENDING_NO, "permissionsToKeep": ["view_users"]},
        )

        assert response.status_code == 200
        assert user_repo.get(PENDING_ID).permissions == frozenset({"view_users"})

    def test_empty_list_revokes_all(self, client, auth_headers, user_repo):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(ADMIN_ID),
            json={"targetIdentifier": MANAGER_NO, "permissionsToKeep": []},
        )

        assert response.status_code == 200
        assert response.json()["permissions"] == []
        assert user_repo.get(MANAGER_ID).permissions == frozenset()

    def test_insufficient_rights(self, client, auth_headers, user_repo):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(MANAGER_ID),
            json={
                "targetIdentifier": PENDING_NO,
                "permissionsToKeep": ["view_users", "delete_systems"],
            },
        )

        assert response.status_code == 403
        data = response.json()
        assert data["code"] == "insufficient_delegation_rights"
        assert data["errors"][0]["message"] == "delete_systems"
        assert data["instance"] == PERMISSIONS_URL
        assert user_repo.get(PENDING_ID).permissions == frozenset()

    def test_self_modification(self, client, auth_headers):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(ADMIN_ID),
            json={"targetIdentifier": ADMIN_NO, "permissionsToKeep": []},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "self_modification"

    def test_wildcard_not_delegable(self, client, auth_headers):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(MANAGER_ID),
            json={"targetIdentifier": PENDING_NO, "permissionsToKeep": ["*"]},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "wildcard_not_delegable"

    def test_unknown_permission(self, client, auth_headers):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(ADMIN_ID),
            json={"targetIdentifier": PENDING_NO, "permissionsToKeep": ["fly", "swim"]},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "unknown_permission"
        assert [e["message"] for e in data["errors"]] == ["fly", "swim"]

    @pytest.mark.parametrize(
        "body",
        [
            {"targetIdentifier": PENDING_NO},
            {"targetIdentifier": PENDING_NO, "permissionsToKeep": None},
            {"targetIdentifier": PENDING_NO, "permissionsToKeep": "view_users"},
            {"targetIdentifier": PENDING_NO, "permissionsToKeep": {"view_users": 1}},
            {"targetIdentifier": PENDING_NO, "permissionsToKeep": ["view_users", 3]},
        ],
    )
    def test_malformed_input(self, client, auth_headers, body):
        response = client.patch(
            PERMISSIONS_URL, headers=auth_headers(ADMIN_ID), json=body
        )

        assert response.status_code == 400
        assert response.json()["code"] == "malformed_input"

    def test_target_not_found(self, client, auth_headers):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(ADMIN_ID),
            json={"targetIdentifier": "0799999999", "permissionsToKeep": []},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "target_not_found"

    def test_stale_wildcard_token_cannot_delegate(self, client, auth_headers, user_repo):
        """The granter's stored set is used, not the token snapshot."""
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(SYSADMIN_ID, permissions={"*"}),
            json={"targetIdentifier": PENDING_NO, "permissionsToKeep": ["view_users"]},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "permission_denied"
        assert user_repo.get(PENDING_ID).permissions == frozenset()

    def test_requires_token(self, client):
        response = client.patch(
            PERMISSIONS_URL,
            json={"targetIdentifier": PENDING_NO, "permissionsToKeep": []},
        )

        assert response.status_code == 401

    def test_missing_target_identifier_is_422(self, client, auth_headers):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(ADMIN_ID),
            json={"permissionsToKeep": []},
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "targetIdentifier"

    def test_delegation_requires_grant_permissions(
        self, client, auth_headers, user_repo
    ):
        """Holding the permissions being granted is not enough."""
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(SYSADMIN_ID),
            json={"targetIdentifier": ADMIN_NO, "permissionsToKeep": []},
        )

        assert response.status_code == 403
        data = response.json()
        assert data["code"] == "permission_denied"
        assert [e["message"] for e in data["errors"]] == ["grant_permissions"]
        assert user_repo.get(ADMIN_ID).permissions == frozenset({"*"})
        assert user_repo.permission_writes == []

    def test_grant_permissions_revoked_after_login(self, client, auth_headers):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(
                SYSADMIN_ID, permissions={"edit_systems", "grant_permissions"}
            ),
            json={"targetIdentifier": PENDING_NO, "permissionsToKeep": []},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "permission_denied"

    def test_denial_does_not_reveal_whether_target_exists(
        self, client, auth_headers, user_repo
    ):
        existing = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(SYSADMIN_ID),
            json={"targetIdentifier": MANAGER_NO, "permissionsToKeep": []},
        )
        missing = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(SYSADMIN_ID),
            json={"targetIdentifier": "0799999999", "permissionsToKeep": []},
        )

        assert existing.status_code == missing.status_code == 403
        assert existing.json()["code"] == missing.json()["code"] == "permission_denied"
        assert existing.json()["detail"] == missing.json()["detail"]
        assert user_repo.permission_writes == []

    def test_denied_before_body_validation(self, client, auth_headers):
        response = client.patch(
            PERMISSIONS_URL,
            headers=auth_headers(SYSADMIN_ID),
            json={"permissionsToKeep": []},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "permission_denied"


@pytest.mark.api
class TestUserAdministration:
    """Tests for listing and status endpoints."""

    def test_list_users(self, client, auth_headers):
        response = client.get(
            "/api/v1/users", headers=auth_headers(MANAGER_ID), params={"pageSize": 2}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert data["pageSize"] == 2
        assert [u["id"] for u in data["users"]] == [1, 2]

    def test_list_users_requires_view_users(self, client, auth_headers):
        response = client.get("/api/v1/users", headers=auth_headers(SYSADMIN_ID))

        assert response.status_code == 403
        assert "view_users" in response.json()["detail"]

    def test_user_permissions(self, client, auth_headers):
        response = client.get(
            f"/api/v1/users/{SYSADMIN_ID}/permissions", headers=auth_headers(ADMIN_ID)
        )

        assert response.status_code == 200
        assert response.json()["permissions"] == ["edit_systems"]

    def test_user_permissions_forbidden_before_not_found(self, client, auth_headers):
        response = client.get(
            "/api/v1/users/999/permissions", headers=auth_headers(SYSADMIN_ID)
        )

        assert response.status_code == 403

    def test_user_permissions_not_found(self, client, auth_headers):
        response = client.get(
            "/api/v1/users/999/permissions", headers=auth_headers(ADMIN_ID)
        )

        assert response.status_code == 404

    def test_activate_user(self, client, auth_headers, user_repo):
        response = client.patch(
            f"/api/v1/users/{PENDING_ID}/status",
            headers=auth_headers(MANAGER_ID),
            json={"status": "active"},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "userId": PENDING_ID, "status": "active"}
        assert user_repo.get(PENDING_ID).status.value == "active"

    def test_status_self_change_forbidden(self, client, auth_headers):
        response = client.patch(
            f"/api/v1/users/{MANAGER_ID}/status",
            headers=auth_headers(MANAGER_ID),
            json={"status": "suspended"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "status_self_modification"

    def test_unknown_status(self, client, auth_headers):
        response = client.patch(
            f"/api/v1/users/{PENDING_ID}/status",
            headers=auth_headers(MANAGER_ID),
            json={"status": "banned"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_status"

    def test_status_target_missing(self, client, auth_headers):
        response = client.patch(
            "/api/v1/users/999/status",
            headers=auth_headers(MANAGER_ID),
            json={"status": "active"},
        )

        assert response.status_code == 404

    def test_status_requires_edit_users_in_store(self, client, auth_headers):
        response = client.patch(
            f"/api/v1/users/{PENDING_ID}/status",
            headers=auth_headers(SYSADMIN_ID, permissions={"edit_users"}),
            json={"status": "active"},
        )

        assert response.status_code == 403


@pytest.mark.api
class TestPermissionVocabulary:
    """Tests for GET /permissions."""

    def test_lists_vocabulary(self, client, auth_headers):
        response = client.get("/api/v1/permissions", headers=auth_headers(PENDING_ID))

        assert response.status_code == 200
        names = [p["name"] for p in response.json()["permissions"]]
        assert "*" in names
        assert "view_users" in names
        assert names == sorted(names)

    def test_requires_token(self, client):
        assert client.get("/api/v1/permissions").status_code == 401
