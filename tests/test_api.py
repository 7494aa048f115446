"""
Testing API via TestClient
- Trick: the fixed_secret fixture replaces secret generation so the secret is predictable.
- Each test gets its own in-memory store (see conftest).
"""


def test_palette_lists_default_and_extra_colors(client):
    response = client.get("/palette")
    assert response.status_code == 200
    body = response.json()
    assert [c["key"] for c in body["default"]] == ["r", "b", "g", "y", "o", "p"]
    assert [c["key"] for c in body["extra"]] == ["c", "m"]


def test_start_with_defaults(client):
    response = client.post("/games")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "in_progress"
    assert body["attempts_left"] == 10
    assert body["config"]["length"] == 4
    assert "secret" not in body


def test_start_and_win_with_fixed_secret(client, fixed_secret):
    """
    Flow:
    1) Start a 3-peg game; secret is r,b,g due to patch.
    2) Wrong-length guess -> 400.
    3) Valid wrong guess -> 200 + feedback.
    4) Winning guess -> 'won' and secret revealed.
    """
    fixed_secret(["r", "b", "g"])

    response = client.post("/games", json={"length": 3, "max_attempts": 8})
    assert response.status_code == 200
    game_id = response.json()["game_id"]

    response = client.post(f"/games/{game_id}/guess", json={"guess": ["r", "b", "g", "y"]})
    assert response.status_code == 400

    response = client.post(f"/games/{game_id}/guess", json={"guess": ["g", "b", "o"]})
    assert response.status_code == 200
    body = response.json()
    assert body["attempt"] == {"guess": ["g", "b", "o"], "exact": 1, "partial": 1}
    assert body["status"] == "in_progress"
    assert body["secret"] is None

    response = client.post(f"/games/{game_id}/guess", json={"guess": ["r", "b", "g"]})
    assert response.status_code == 200
    final = response.json()
    assert final["status"] == "won"
    assert final["secret"] == ["r", "b", "g"]
    assert "No more guesses" in final["note"]


def test_empty_slot_is_rejected(client, fixed_secret):
    fixed_secret("rbgy")
    game_id = client.post("/games").json()["game_id"]

    response = client.post(f"/games/{game_id}/guess", json={"guess": ["r", None, "g", "y"]})
    assert response.status_code == 400

    state = client.get(f"/games/{game_id}").json()
    assert state["history"] == []


def test_loss_then_no_more_guesses(client, fixed_secret):
    fixed_secret("rbgy")
    game_id = client.post("/games", json={"max_attempts": 2}).json()["game_id"]

    for _ in range(2):
        r = client.post(f"/games/{game_id}/guess", json={"guess": ["o", "o", "o", "o"]})
        assert r.status_code == 200
    assert r.json()["status"] == "lost"

    r = client.post(f"/games/{game_id}/guess", json={"guess": ["r", "b", "g", "y"]})
    assert r.status_code == 409

    state = client.get(f"/games/{game_id}").json()
    assert state["status"] == "lost"
    assert state["attempts_used"] == 2
    assert state["secret"] == ["r", "b", "g", "y"]


def test_reveal_secret_does_not_change_game(client, fixed_secret):
    fixed_secret("rbgy")
    game_id = client.post("/games").json()["game_id"]

    for _ in range(2):
        r = client.get(f"/games/{game_id}/secret")
        assert r.status_code == 200
        assert r.json()["secret"] == ["r", "b", "g", "y"]
        assert r.json()["status"] == "in_progress"

    state = client.get(f"/games/{game_id}").json()
    assert state["status"] == "in_progress"
    assert state["history"] == []
    assert state["secret"] is None


def test_custom_palette_and_extra_colors(client):
    response = client.post(
        "/games",
        json={"palette": [{"key": "a"}, {"key": "z", "label": "Zed", "hex": "#000000"}], "extra_colors": True},
    )
    assert response.status_code == 200
    palette = response.json()["config"]["palette"]
    assert [c["key"] for c in palette] == ["a", "z", "c", "m"]
    assert palette[0]["label"] == "A"


def test_bad_configuration_is_rejected(client):
    assert client.post("/games", json={"length": 1}).status_code == 422
    assert client.post("/games", json={"length": 11}).status_code == 422
    assert client.post("/games", json={"max_attempts": 0}).status_code == 422
    assert client.post("/games", json={"palette": []}).status_code == 422
    assert client.post("/games", json={"palette": [{"key": "r"}, {"key": "r"}]}).status_code == 422


def test_restart_keeps_id_and_resets_history(client):
    game_id = client.post("/games").json()["game_id"]
    client.post(f"/games/{game_id}/guess", json={"guess": ["r", "r", "r", "r"]})

    response = client.post(f"/games/{game_id}/restart", json={"length": 5, "allow_duplicates": False})
    assert response.status_code == 200
    body = response.json()
    assert body["game_id"] == game_id
    assert body["config"]["length"] == 5
    assert body["config"]["allow_duplicates"] is False

    state = client.get(f"/games/{game_id}").json()
    assert state["history"] == []
    assert state["attempts_left"] == 10


def test_unknown_game_is_404(client):
    assert client.get("/games/does-not-exist").status_code == 404
    assert client.get("/games/does-not-exist/secret").status_code == 404
    assert client.post("/games/does-not-exist/guess", json={"guess": ["r"]}).status_code == 404
    assert client.post("/games/does-not-exist/restart").status_code == 404


def test_delete_game(client):
    game_id = client.post("/games").json()["game_id"]

    response = client.delete(f"/games/{game_id}")
    assert response.status_code == 200
    assert client.get(f"/games/{game_id}").status_code == 404
    assert client.delete(f"/games/{game_id}").status_code == 404
