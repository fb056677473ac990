def mark(client, headers, child_id, word_id, status="known"):
    r = client.post(f"/vocabulary/children/{child_id}/words/{word_id}", json={"status": status}, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()


def test_catalogue_is_seeded(client, auth_headers, words):
    r = client.get("/vocabulary/categories", headers=auth_headers)
    categories = r.json()["categories"]
    assert len(categories) == 14
    assert [c["name"] for c in categories] == sorted(c["name"] for c in categories)
    assert len(words) == 190
    assert all(w["category"]["icon"] for w in words)


def test_words_for_level(client, auth_headers):
    r = client.get("/vocabulary/levels/0", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()
    assert {w["level"] for w in r.json()} == {0}
    assert client.get("/vocabulary/levels/4", headers=auth_headers).status_code == 400


def test_ten_known_words_reach_level_one(client, auth_headers, child, words):
    results = [mark(client, auth_headers, child["id"], w["id"]) for w in words[:10]]
    last = results[-1]
    assert last["known_words_total"] == 10
    assert last["level"]["current"] == 1
    assert last["level"]["source"] == "vocabulary_size"
    assert results[-2]["level"]["current"] == 0

    body = client.get(f"/children/{child['id']}", headers=auth_headers).json()
    assert body["level"] == 1
    assert body["level_source"] == "vocabulary_size"


def test_removing_a_word_drops_level_once(client, auth_headers, child, words):
    for w in words[:10]:
        mark(client, auth_headers, child["id"], w["id"])

    first = mark(client, auth_headers, child["id"], words[0]["id"], "remove")
    assert first["known_words_total"] == 9
    assert first["level"] == {
        "child_id": child["id"],
        "previous": 1,
        "current": 0,
        "source": "vocabulary_size",
        "changed": True,
    }
    again = mark(client, auth_headers, child["id"], words[0]["id"], "remove")
    assert again["known_words_total"] == 9
    assert again["level"]["changed"] is False


def test_known_is_idempotent(client, auth_headers, child, words):
    mark(client, auth_headers, child["id"], words[0]["id"])
    body = mark(client, auth_headers, child["id"], words[0]["id"])
    assert body["known_words_total"] == 1
    vocab = client.get(f"/vocabulary/children/{child['id']}", headers=auth_headers).json()
    assert [w["id"] for w in vocab["known_words"]] == [words[0]["id"]]
    assert vocab["learning_words"] == []


def test_learning_stores_nothing(client, auth_headers, child, words):
    body = mark(client, auth_headers, child["id"], words[0]["id"], "learning")
    assert body["known_words_total"] == 0
    assert body["status"] == "learning"


def test_bad_requests(client, auth_headers, child, words):
    r = client.post(f"/vocabulary/children/{child['id']}/words/missing", json={"status": "known"}, headers=auth_headers)
    assert r.status_code == 404
    r = client.post(f"/vocabulary/children/{child['id']}/words/{words[0]['id']}", json={"status": "mastered"}, headers=auth_headers)
    assert r.status_code == 422
    r = client.post(f"/vocabulary/children/nobody/words/{words[0]['id']}", json={"status": "known"}, headers=auth_headers)
    assert r.status_code == 404
