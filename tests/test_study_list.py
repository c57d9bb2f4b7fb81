"""
Tests for the study list endpoints.
"""


def test_list_entries_for_user(client, fake_db):
    fake_db.queue([{"user_id": 2, "recommendation_id": 7}])

    response = client.get("/study_list/2")

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "data": [{"user_id": 2, "recommendation_id": 7}],
    }
    assert fake_db.last == ("fetch_all", "SELECT * FROM study_list WHERE user_id = $1", (2,))


def test_list_entries_failure(client, fake_db):
    fake_db.fail_with("boom")

    response = client.get("/study_list/2")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "boom"


def test_add_entry(client, fake_db):
    response = client.post("/study_list/2/7")

    assert response.status_code == 201
    assert response.json() == {"status": "success"}
    assert fake_db.last == (
        "execute",
        "INSERT INTO study_list (user_id, recommendation_id) VALUES ($1, $2)",
        (2, 7),
    )


def test_add_duplicate_entry_is_400(client, fake_db):
    fake_db.fail_with("duplicate key value violates unique constraint", code="23505")

    response = client.post("/study_list/2/7")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "23505"


def test_remove_entry_runs_before_the_next_listing(client, fake_db):
    response = client.delete("/study_list/2/7")
    listing = client.get("/study_list/2")

    assert response.status_code == 201
    assert response.json() == {"status": "success"}
    assert listing.json() == {"status": "success", "data": []}
    assert fake_db.calls == [
        (
            "execute",
            "DELETE FROM study_list WHERE user_id = $1 AND recommendation_id = $2",
            (2, 7),
        ),
        ("fetch_all", "SELECT * FROM study_list WHERE user_id = $1", (2,)),
    ]


def test_remove_entry_failure_is_400_with_error(client, fake_db):
    fake_db.fail_with("connection lost")

    response = client.delete("/study_list/2/7")

    assert response.status_code == 400
    assert response.json() == {
        "status": "failed",
        "error": {"name": "StoreError", "message": "connection lost"},
    }
