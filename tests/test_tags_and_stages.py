"""
Tests for the tag and stage endpoints.
"""


def test_create_tag_binds_path_recommendation(client, fake_db):
    response = client.post("/tags/7", json={"name": "algorithms"})

    assert response.status_code == 201
    assert response.json() == {"status": "success"}
    kind, sql, args = fake_db.last
    assert kind == "execute"
    assert sql == "INSERT INTO tags (name, recommendation_id) VALUES ($1, $2)"
    assert args == ("algorithms", 7)


def test_create_tag_failure_is_400(client, fake_db):
    fake_db.fail_with("violates foreign key constraint \"tags_recommendation_id_fkey\"")

    response = client.post("/tags/7", json={"name": "algorithms"})

    assert response.status_code == 400
    assert response.json()["status"] == "failed"
    assert "tags_recommendation_id_fkey" in response.json()["error"]["message"]


def test_list_tags(client, fake_db):
    fake_db.queue([{"tag_id": 1, "name": "algorithms", "recommendation_id": 7}])

    response = client.get("/tags")

    assert response.status_code == 200
    assert response.json()["data"] == [{"tag_id": 1, "name": "algorithms", "recommendation_id": 7}]
    assert fake_db.last == ("fetch_all", "SELECT * FROM tags", ())


def test_list_tags_failure(client, fake_db):
    fake_db.fail_with("boom")

    response = client.get("/tags")

    assert response.status_code == 404
    assert response.json() == {
        "status": "failed",
        "error": {"name": "StoreError", "message": "boom"},
    }


def test_list_stages(client, fake_db):
    fake_db.queue([{"stage_id": 1, "description": "Want to study"}])

    response = client.get("/stages")

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "data": [{"stage_id": 1, "description": "Want to study"}],
    }
    assert fake_db.last == ("fetch_all", "SELECT * FROM stages", ())


def test_list_stages_failure(client, fake_db):
    fake_db.fail_with("boom")

    response = client.get("/stages")

    assert response.status_code == 404
    assert response.json()["status"] == "failed"
