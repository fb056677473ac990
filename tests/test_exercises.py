def find(client, headers, title):
    rows = client.get("/exercises", headers=headers).json()
    return next(e for e in rows if e["title"] == title)


def test_list_and_filter(client, auth_headers):
    rows = client.get("/exercises", headers=auth_headers).json()
    assert len(rows) == 15
    assert [e["level"] for e in rows] == sorted(e["level"] for e in rows)

    level_zero = client.get("/exercises?level=0", headers=auth_headers).json()
    assert level_zero and all(e["level"] == 0 for e in level_zero)

    matching = client.get("/exercises?type=matching", headers=auth_headers).json()
    assert matching and all(e["type"] == "MATCHING" for e in matching)

    assert client.get("/exercises?level=9", headers=auth_headers).status_code == 400
    assert client.get("/exercises?type=DANCING", headers=auth_headers).status_code == 400


def test_get_exercise(client, auth_headers):
    mama = find(client, auth_headers, "Point to Mama")
    r = client.get(f"/exercises/{mama['id']}", headers=auth_headers)
    assert r.json()["content"]["images"][0]["url"] == "/images/mama.jpg"
    assert mama["word_id"] is not None
    assert client.get("/exercises/missing", headers=auth_headers).status_code == 404


def test_submit_result_updates_progress(client, auth_headers, child):
    mama = find(client, auth_headers, "Point to Mama")
    r = client.post(
        f"/exercises/{mama['id']}/results",
        json={"child_id": child["id"], "selected_answers": ["/images/mama.jpg"], "time_spent": 12},
        headers=auth_headers,
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["score"] == 100
    assert body["status"] == "COMPLETED"
    assert body["passed"] is True
    assert body["notes"] == "Score: 100%"

    progress = client.get(f"/progress/children/{child['id']}", headers=auth_headers).json()
    assert progress["exercises_completed"] == 1
    assert progress["average_score"] == 100.0
    assert progress["weekly"][0]["exercises_done"] == 1
    assert progress["weekly"][0]["total_score"] == 100


def test_skipped_result(client, auth_headers, child):
    mama = find(client, auth_headers, "Point to Mama")
    r = client.post(f"/exercises/{mama['id']}/results", json={"child_id": child["id"], "skipped": True}, headers=auth_headers)
    body = r.json()
    assert body["status"] == "SKIPPED"
    assert body["score"] is None
    assert body["notes"] == "Skipped"

    progress = client.get(f"/progress/children/{child['id']}", headers=auth_headers).json()
    assert progress["exercises_skipped"] == 1
    assert progress["weekly"] == []


def test_result_for_unknown_child(client, auth_headers):
    mama = find(client, auth_headers, "Point to Mama")
    r = client.post(f"/exercises/{mama['id']}/results", json={"child_id": "nobody"}, headers=auth_headers)
    assert r.status_code == 404


def test_dashboard(client, auth_headers, child, words):
    for w in words[:3]:
        client.post(f"/vocabulary/children/{child['id']}/words/{w['id']}", json={"status": "known"}, headers=auth_headers)
    r = client.get("/progress/dashboard", headers=auth_headers)
    body = r.json()
    assert body["known_words_total"] == 3
    assert body["children"][0]["child"]["id"] == child["id"]
    assert sum(body["children"][0]["known_words_by_level"].values()) == 3
    assert body["children"][0]["weekly"][0]["words_learned"] == 3
