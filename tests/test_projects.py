def create_project(client, user, name="Apollo", description="moon"):
    response = client.post("/createproject", json={"name": name, "description": description}, headers=user.headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_project_sets_owner(client, alice):
    response = client.post(
        "/createproject",
        json={"name": "Apollo", "description": "moon", "owner_id": "someone-else", "id": "fixed"},
        headers=alice.headers
    )

    assert response.status_code == 201
    body = response.json()
    assert body["owner_id"] == alice.id
    assert body["id"] != "fixed"
    assert body["members"] == []


def test_create_project_name_length(client, alice):
    response = client.post("/createproject", json={"name": "AB"}, headers=alice.headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "name"

    response = client.post("/createproject", json={"name": "A" * 11}, headers=alice.headers)
    assert response.status_code == 400


def test_list_projects_visibility(client, admin, alice, bob):
    owned = create_project(client, alice, name="Alpha")
    shared = create_project(client, bob, name="Shared")
    create_project(client, bob, name="Private")

    response = client.post(f"/projects/{shared['id']}/members", json={"user_id": alice.id}, headers=bob.headers)
    assert response.status_code == 200

    alice_ids = {p["id"] for p in client.get("/getproject", headers=alice.headers).json()}
    admin_ids = {p["id"] for p in client.get("/getproject", headers=admin.headers).json()}

    assert alice_ids == {owned["id"], shared["id"]}
    assert len(admin_ids) == 3
    assert alice_ids <= admin_ids


def test_list_projects_pagination(client, alice):
    for name in ("One", "Two", "Three"):
        create_project(client, alice, name=name)

    first_page = client.get("/getproject", params={"page": 1, "per_page": 2}, headers=alice.headers).json()
    second_page = client.get("/getproject", params={"page": 2, "per_page": 2}, headers=alice.headers).json()
    fallback = client.get("/getproject", params={"page": 0, "per_page": -5}, headers=alice.headers)

    assert len(first_page) == 2
    assert len(second_page) == 1
    assert {p["id"] for p in first_page}.isdisjoint({p["id"] for p in second_page})
    assert fallback.status_code == 200
    assert len(fallback.json()) == 3


def test_update_project_owner_only(client, admin, alice, bob):
    project = create_project(client, alice)

    response = client.put(f"/updateproject/{project['id']}", json={"name": "Hijack"}, headers=bob.headers)
    assert response.status_code == 403
    assert response.json()["status"] == 403

    response = client.put(f"/updateproject/{project['id']}", json={"name": "Gemini"}, headers=alice.headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Gemini"
    # 未传字段保持不变
    assert response.json()["description"] == "moon"

    response = client.put(f"/updateproject/{project['id']}", json={"description": "mars"}, headers=admin.headers)
    assert response.status_code == 200
    assert response.json()["description"] == "mars"


def test_update_project_ignores_owner_change(client, alice, bob):
    project = create_project(client, alice)

    response = client.put(f"/updateproject/{project['id']}", json={"owner_id": bob.id}, headers=alice.headers)

    assert response.status_code == 200
    assert response.json()["owner_id"] == alice.id


def test_update_project_rejects_null_name(client, alice):
    project = create_project(client, alice)

    response = client.put(f"/updateproject/{project['id']}", json={"name": None}, headers=alice.headers)

    assert response.status_code == 400


def test_update_missing_project(client, alice):
    response = client.put("/updateproject/missing", json={"name": "Gemini"}, headers=alice.headers)

    assert response.status_code == 404
    assert response.json()["status"] == 404


def test_delete_project(client, alice, bob):
    project = create_project(client, alice)

    response = client.delete(f"/deleteproject/{project['id']}", headers=bob.headers)
    assert response.status_code == 403

    response = client.delete(f"/deleteproject/{project['id']}", headers=alice.headers)
    assert response.status_code == 204
    assert response.content == b""

    response = client.delete(f"/deleteproject/{project['id']}", headers=alice.headers)
    assert response.status_code == 404


def test_manager_cannot_touch_foreign_project(client, manager, alice):
    project = create_project(client, alice)

    response = client.delete(f"/deleteproject/{project['id']}", headers=manager.headers)

    assert response.status_code == 403


def test_add_member_is_idempotent(client, alice, bob):
    project = create_project(client, alice)
    url = f"/projects/{project['id']}/members"

    first = client.post(url, json={"user_id": bob.id}, headers=alice.headers)
    second = client.post(url, json={"user_id": bob.id}, headers=alice.headers)

    assert first.status_code == 200
    assert second.status_code == 200
    members = second.json()["members"]
    assert [member["id"] for member in members] == [bob.id]
    assert members[0]["username"] == "bob"


def test_add_member_requires_owner(client, alice, bob):
    project = create_project(client, alice)

    response = client.post(f"/projects/{project['id']}/members", json={"user_id": bob.id}, headers=bob.headers)

    assert response.status_code == 403


def test_add_member_missing_targets(client, alice):
    project = create_project(client, alice)

    response = client.post(f"/projects/{project['id']}/members", json={"user_id": "missing"}, headers=alice.headers)
    assert response.status_code == 404

    response = client.post("/projects/missing/members", json={"user_id": alice.id}, headers=alice.headers)
    assert response.status_code == 404


def test_admin_owned_project(client, admin, alice):
    project = create_project(client, admin)
    assert project["owner_id"] == admin.id

    response = client.put(f"/updateproject/{project['id']}", json={"name": "Mine"}, headers=alice.headers)
    assert response.status_code == 403

    response = client.put(f"/updateproject/{project['id']}", json={"name": "Ours"}, headers=admin.headers)
    assert response.status_code == 200


def test_list_projects_page_beyond_range(client, alice):
    create_project(client, alice)

    response = client.get("/getproject", params={"page": "100000000000000000000"}, headers=alice.headers)

    assert response.status_code == 200
    assert response.json() == []
