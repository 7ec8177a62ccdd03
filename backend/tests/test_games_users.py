# backend/tests/test_games_users.py
from models import Game, Review, User, db


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_json()["resources"] == ["/games", "/users", "/reviews"]


# --- games ---

def test_list_games_sorted_by_title(client, seeded):
    resp = client.get("/games")
    assert resp.status_code == 200
    titles = [g["title"] for g in resp.get_json()]
    assert titles == ["Breath of the Wild", "Hades"]
    assert "reviews" not in resp.get_json()[0]


def test_game_by_id_embeds_reviews(client, seeded):
    resp = client.get(f"/games/{seeded['games'][0]}")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["price"] == 60
    assert sorted(r["score"] for r in data["reviews"]) == [7, 10]


def test_game_not_found(client):
    resp = client.get("/games/42")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Game 42 not found."}


def test_game_users(client, seeded):
    resp = client.get(f"/games/users/{seeded['games'][0]}")
    assert resp.status_code == 200
    assert [u["name"] for u in resp.get_json()] == ["Ada Lovelace", "Grace Hopper"]


def test_game_users_lists_each_user_once(client, seeded):
    hades = seeded["games"][1]
    client.post("/reviews", json={"score": 3, "game_id": hades, "user_id": seeded["users"][0]})
    resp = client.get(f"/games/users/{hades}")
    assert [u["name"] for u in resp.get_json()] == ["Ada Lovelace"]


def test_game_users_not_found(client):
    assert client.get("/games/users/42").status_code == 404


def test_deleting_review_removes_it_from_game(client, seeded):
    client.delete(f"/reviews/{seeded['reviews'][0]}")
    data = client.get(f"/games/{seeded['games'][0]}").get_json()
    assert [r["score"] for r in data["reviews"]] == [7]


# --- users ---

def test_list_users(client, seeded):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert [u["name"] for u in resp.get_json()] == ["Ada Lovelace", "Grace Hopper"]


def test_user_by_id_embeds_reviews(client, seeded):
    resp = client.get(f"/users/{seeded['users'][0]}")
    assert resp.status_code == 200
    assert len(resp.get_json()["reviews"]) == 2


def test_user_not_found(client):
    resp = client.get("/users/42")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "User 42 not found."}


def test_games_post_not_allowed(client):
    resp = client.post("/games", json={"title": "Tetris"})
    assert resp.status_code == 405


def test_game_huge_id_is_404(client):
    assert client.get("/games/99999999999999999999").status_code == 404
    assert client.get("/games/users/99999999999999999999").status_code == 404


def test_user_huge_id_is_404(client):
    assert client.get("/users/99999999999999999999").status_code == 404


# --- cascades ---

def test_deleting_game_deletes_its_reviews(client, seeded):
    db.session.delete(db.session.get(Game, seeded["games"][0]))
    db.session.commit()

    assert Review.query.count() == 1
    assert client.get(f"/reviews/{seeded['reviews'][0]}").status_code == 404
    assert client.get(f"/reviews/{seeded['reviews'][1]}").status_code == 200


def test_deleting_user_deletes_their_reviews(client, seeded):
    db.session.delete(db.session.get(User, seeded["users"][0]))
    db.session.commit()

    assert Review.query.count() == 1
    remaining = client.get("/reviews").get_json()
    assert [r["user"]["name"] for r in remaining] == ["Grace Hopper"]
