import pytest

from conftest import API, login

USERS = f"{API}/admin/users"


def new_user(role="user", email="new@example.com"):
    return {"email": email, "password": "new-secret", "name": "New", "role": role}


def test_super_admin_creates_user_with_profile(client, super_admin):
    response = client.post(USERS, json=new_user("admin"), headers=super_admin["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["profile"]["role"] == "admin"
    assert body["profile"]["createdBy"] == super_admin["id"]
    assert body["user"]["email"] == "new@example.com"

    headers = login(client, "new@example.com", "new-secret")
    assert client.get(f"{API}/profile", headers=headers).json()["profile"]["role"] == "admin"


@pytest.mark.parametrize("role", ["super_admin", "admin", "user", "viewer"])
def test_hidden_email_is_unavailable_at_any_role(client, super_admin, role):
    payload = new_user(role, email="hidden.admin@example.com")
    response = client.post(USERS, json=payload, headers=super_admin["headers"])

    assert response.status_code == 400
    assert response.json()["error"] == "EmailUnavailable"


def test_cannot_create_another_super_admin(client, super_admin):
    response = client.post(USERS, json=new_user("super_admin"), headers=super_admin["headers"])

    assert response.status_code == 400
    assert response.json()["error"] == "Forbidden"


def test_invalid_role_is_rejected(client, super_admin):
    response = client.post(USERS, json=new_user("owner"), headers=super_admin["headers"])

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_duplicate_email_is_rejected_by_identity_provider(client, super_admin):
    client.post(USERS, json=new_user(), headers=super_admin["headers"])
    response = client.post(USERS, json=new_user(), headers=super_admin["headers"])

    assert response.status_code == 400
    assert response.json()["error"] == "UpstreamError"


def test_listing_hides_hidden_super_admin(client, super_admin, hidden_admin, make_user):
    make_user("viewer")

    response = client.get(USERS, headers=super_admin["headers"])

    ids = {profile["userId"] for profile in response.json()["users"]}
    assert super_admin["id"] in ids
    assert hidden_admin["id"] not in ids
    assert len(ids) == 2


def test_hidden_super_admin_can_manage_users(client, hidden_admin):
    response = client.post(USERS, json=new_user("viewer"), headers=hidden_admin["headers"])
    assert response.status_code == 200
    assert response.json()["profile"]["createdBy"] == hidden_admin["id"]


@pytest.mark.parametrize("role", ["admin", "user", "viewer"])
def test_user_management_is_super_admin_only(client, make_user, role):
    caller = make_user(role)

    assert client.get(USERS, headers=caller["headers"]).status_code == 403
    response = client.post(USERS, json=new_user(), headers=caller["headers"])
    assert response.status_code == 403
    assert response.json()["error"] == "InsufficientRole"


def test_update_user(client, super_admin, make_user):
    target = make_user("viewer")

    response = client.put(f"{USERS}/{target['id']}", json={"name": "Promoted", "role": "admin"}, headers=super_admin["headers"])

    assert response.status_code == 200
    profile = response.json()["profile"]
    assert profile["name"] == "Promoted"
    assert profile["role"] == "admin"
    assert "updatedAt" in profile


def test_update_missing_user_is_not_found(client, super_admin):
    response = client.put(f"{USERS}/missing", json={"name": "X", "role": "user"}, headers=super_admin["headers"])
    assert response.status_code == 404
    assert response.json()["error"] == "NotFound"


def test_cannot_promote_to_super_admin(client, super_admin, make_user):
    target = make_user("user")
    response = client.put(f"{USERS}/{target['id']}", json={"name": "X", "role": "super_admin"}, headers=super_admin["headers"])
    assert response.status_code == 400
    assert response.json()["error"] == "Forbidden"


def test_protected_profiles_cannot_be_updated_or_deleted(client, super_admin, hidden_admin):
    # visible super admin acting on the hidden one
    for method in ("put", "delete"):
        kwargs = {"json": {"name": "X", "role": "user"}} if method == "put" else {}
        response = getattr(client, method)(f"{USERS}/{hidden_admin['id']}", headers=super_admin["headers"], **kwargs)
        assert response.status_code == 400
        assert response.json()["error"] == "Forbidden"

    # hidden super admin acting on the visible one
    for method in ("put", "delete"):
        kwargs = {"json": {"name": "X", "role": "user"}} if method == "put" else {}
        response = getattr(client, method)(f"{USERS}/{super_admin['id']}", headers=hidden_admin["headers"], **kwargs)
        assert response.status_code == 400
        assert response.json()["error"] == "Forbidden"

    profile = client.get(f"{API}/profile", headers=super_admin["headers"]).json()["profile"]
    assert profile["role"] == "super_admin"


def test_cannot_delete_yourself(client, super_admin):
    response = client.delete(f"{USERS}/{super_admin['id']}", headers=super_admin["headers"])
    assert response.status_code == 400
    assert response.json()["error"] == "SelfDeleteForbidden"


def test_delete_user_removes_profile_and_account(client, super_admin, make_user):
    target = make_user("viewer")

    response = client.delete(f"{USERS}/{target['id']}", headers=super_admin["headers"])
    assert response.status_code == 200

    users = client.get(USERS, headers=super_admin["headers"]).json()["users"]
    assert target["id"] not in {profile["userId"] for profile in users}

    relogin = client.post(f"{API}/auth/login", json={"email": "viewer@example.com", "password": "user-secret"})
    assert relogin.status_code == 401
    # old token no longer resolves to an account
    assert client.get(f"{API}/profile", headers=target["headers"]).status_code == 401


def test_delete_missing_user_is_not_found(client, super_admin):
    response = client.delete(f"{USERS}/missing", headers=super_admin["headers"])
    assert response.status_code == 404
