import pytest


@pytest.fixture()
def project(client, alice):
    response = client.post("/createproject", json={"name": "Apollo"}, headers=alice.headers)
    return response.json()


def create_task(client, user, project_id, title="Build rocket", **extra):
    payload = {"title": title, "project_id": project_id, **extra}
    response = client.post("/createtask", json=payload, headers=user.headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_task_is_pending(client, alice, project):
    task = create_task(client, alice, project["id"], status="completed", creator_id="someone-else")

    assert task["status"] == "pending"
    assert task["creator_id"] == alice.id
    assert task["project_id"] == project["id"]
    assert task["assignee_id"] is None


def test_create_task_missing_references(client, alice, project):
    response = client.post("/createtask", json={"title": "Orphan", "project_id": "missing"}, headers=alice.headers)
    assert response.status_code == 404

    response = client.post(
        "/createtask",
        json={"title": "Orphan", "project_id": project["id"], "assignee_id": "missing"},
        headers=alice.headers
    )
    assert response.status_code == 404


def test_create_task_title_length(client, alice, project):
    response = client.post("/createtask", json={"title": "ab", "project_id": project["id"]}, headers=alice.headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "title"


def test_list_tasks_visibility(client, admin, alice, bob, make_user, project):
    carol = make_user("carol")
    created = create_task(client, alice, project["id"], title="Mine")
    assigned = create_task(client, carol, project["id"], title="Assigned", assignee_id=alice.id)
    create_task(client, bob, project["id"], title="Hidden")

    alice_ids = {t["id"] for t in client.get("/gettask", headers=alice.headers).json()}
    admin_ids = {t["id"] for t in client.get("/gettask", headers=admin.headers).json()}

    assert alice_ids == {created["id"], assigned["id"]}
    assert len(admin_ids) == 3
    assert alice_ids <= admin_ids


def test_list_tasks_filters(client, alice, project):
    task = create_task(client, alice, project["id"], title="Started")
    create_task(client, alice, project["id"], title="Waiting")
    client.put(f"/updatetask/{task['id']}", json={"status": "in_progress"}, headers=alice.headers)

    response = client.get("/gettask", params={"status": "in_progress"}, headers=alice.headers)
    assert [t["id"] for t in response.json()] == [task["id"]]

    response = client.get("/gettask", params={"project_id": "missing"}, headers=alice.headers)
    assert response.json() == []

    response = client.get("/gettask", params={"status": "done"}, headers=alice.headers)
    assert response.status_code == 400


def test_update_task_by_assignee(client, alice, bob, project):
    task = create_task(client, alice, project["id"], assignee_id=bob.id)

    response = client.put(f"/updatetask/{task['id']}", json={"status": "completed"}, headers=bob.headers)

    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    assert response.json()["title"] == "Build rocket"


def test_update_task_forbidden(client, alice, bob, project):
    task = create_task(client, alice, project["id"])

    response = client.put(f"/updatetask/{task['id']}", json={"title": "Stolen"}, headers=bob.headers)

    assert response.status_code == 403


def test_update_task_null_fields(client, alice, bob, project):
    task = create_task(client, alice, project["id"], assignee_id=bob.id)

    response = client.put(f"/updatetask/{task['id']}", json={"title": None}, headers=alice.headers)
    assert response.status_code == 400

    # assignee_id 显式传 null 表示取消指派
    response = client.put(f"/updatetask/{task['id']}", json={"assignee_id": None}, headers=alice.headers)
    assert response.status_code == 200
    assert response.json()["assignee_id"] is None


def test_update_task_missing_assignee(client, alice, project):
    task = create_task(client, alice, project["id"])

    response = client.put(f"/updatetask/{task['id']}", json={"assignee_id": "missing"}, headers=alice.headers)

    assert response.status_code == 404


def test_delete_task(client, admin, alice, bob, project):
    task = create_task(client, alice, project["id"], assignee_id=bob.id)

    # 负责人不能删除
    response = client.delete(f"/deletetask/{task['id']}", headers=bob.headers)
    assert response.status_code == 403

    response = client.delete(f"/deletetask/{task['id']}", headers=alice.headers)
    assert response.status_code == 204

    other = create_task(client, alice, project["id"])
    response = client.delete(f"/deletetask/{other['id']}", headers=admin.headers)
    assert response.status_code == 204


def test_delete_missing_task(client, alice):
    response = client.delete("/deletetask/missing", headers=alice.headers)

    assert response.status_code == 404
    assert response.json()["status"] == 404


def test_list_tasks_invalid_pagination_falls_back(client, alice, project):
    for index in range(12):
        create_task(client, alice, project["id"], title=f"Task {index}")

    response = client.get("/gettask", params={"page": 0, "per_page": -5}, headers=alice.headers)

    assert response.status_code == 200
    assert len(response.json()) == 10


def test_list_tasks_empty_status_means_no_filter(client, alice, project):
    create_task(client, alice, project["id"], title="Started")
    create_task(client, alice, project["id"], title="Waiting")

    response = client.get("/gettask?status=", headers=alice.headers)

    assert response.status_code == 200
    assert len(response.json()) == 2
