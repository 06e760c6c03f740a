from models import User, UserRole
from services.user_service import UserService


def test_list_users_admin_only(client, admin, alice):
    response = client.get("/users", headers=admin.headers)
    assert response.status_code == 200
    usernames = {user["username"] for user in response.json()}
    assert usernames == {"admin", "alice"}
    assert all("password_hash" not in user for user in response.json())

    response = client.get("/users", headers=alice.headers)
    assert response.status_code == 403
    assert response.json()["status"] == 403

    assert client.get("/users").status_code == 401


def test_list_users_pagination(client, admin, alice, bob):
    response = client.get("/users", params={"per_page": 2, "page": 2}, headers=admin.headers)

    assert response.status_code == 200
    assert len(response.json()) == 1


def test_manager_is_not_admin(client, manager):
    assert client.get("/users", headers=manager.headers).status_code == 403


def test_delete_user(client, admin, alice, bob):
    assert client.delete(f"/deleteusers/{bob.id}", headers=alice.headers).status_code == 403

    response = client.delete(f"/deleteusers/{bob.id}", headers=admin.headers)
    assert response.status_code == 204
    assert response.content == b""

    assert client.delete(f"/deleteusers/{bob.id}", headers=admin.headers).status_code == 404


def test_update_self(client, alice):
    response = client.put(f"/updateuser/{alice.id}", json={"username": "alicia"}, headers=alice.headers)

    assert response.status_code == 200
    assert response.json()["username"] == "alicia"
    assert response.json()["role"] == "team_member"


def test_update_other_user_forbidden(client, alice, bob):
    response = client.put(f"/updateuser/{bob.id}", json={"username": "bobby"}, headers=alice.headers)

    assert response.status_code == 403


def test_admin_updates_any_user(client, admin, alice):
    response = client.put(f"/updateuser/{alice.id}", json={"role": "manager"}, headers=admin.headers)

    assert response.status_code == 200
    assert response.json()["role"] == "manager"


def test_self_role_escalation_forbidden(client, alice):
    response = client.put(f"/updateuser/{alice.id}", json={"role": "admin"}, headers=alice.headers)

    assert response.status_code == 403

    # 重新提交当前角色不算修改
    response = client.put(f"/updateuser/{alice.id}", json={"role": "team_member"}, headers=alice.headers)
    assert response.status_code == 200


def test_update_password(client, db_session, alice):
    response = client.put(f"/updateuser/{alice.id}", json={"password": "newpass123"}, headers=alice.headers)
    assert response.status_code == 200

    stored = db_session.get(User, alice.id)
    assert stored.password_hash != "newpass123"

    assert client.post("/login", json={"username": "alice", "password": "secret123"}).status_code == 401
    assert client.post("/login", json={"username": "alice", "password": "newpass123"}).status_code == 200


def test_empty_password_keeps_old_one(client, alice):
    response = client.put(f"/updateuser/{alice.id}", json={"password": ""}, headers=alice.headers)

    assert response.status_code == 200
    assert client.post("/login", json={"username": "alice", "password": "secret123"}).status_code == 200


def test_update_username_conflict(client, alice, bob):
    response = client.put(f"/updateuser/{alice.id}", json={"username": "bob"}, headers=alice.headers)

    assert response.status_code == 400


def test_update_missing_user(client, admin):
    response = client.put("/updateuser/missing", json={"username": "ghost"}, headers=admin.headers)

    assert response.status_code == 404


def test_ensure_default_admin_is_idempotent(db_session):
    service = UserService(db_session)

    first = service.ensure_default_admin("root", "rootpass")
    second = service.ensure_default_admin("root", "rootpass")

    assert first.id == second.id
    assert first.role == UserRole.ADMIN
    assert db_session.query(User).filter(User.username == "root").count() == 1
