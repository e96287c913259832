import pytest

from blog import posts


def test_single_post_exact_body(client):
    r = client.get("/api/posts/1")
    assert r.status_code == 200
    assert r.mimetype == "application/json"
    assert r.data == (
        b'{"id":1,"title":"Hello World!","body":"First ever post on this blog",'
        b'"author":"rexxor","date":"30th March 2019"}\n'
    )


def test_post_list(client):
    r = client.get("/api/posts/")
    assert r.status_code == 200
    data = r.get_json()
    assert [entry["id"] for entry in data] == [1, 2, 3]
    assert list(data[0]) == ["id", "title", "description", "author", "date"]
    assert data[2] == {
        "id": 3,
        "title": "Some stuff about frontends!",
        "description": "Third ever post on this blog",
        "author": "rexxor",
        "date": "17th April 2019",
    }


@pytest.mark.parametrize("path", ["/api/posts/2", "/api/posts/drafts/7"])
def test_other_paths_under_posts_return_list(client, path):
    r = client.get(path)
    assert r.status_code == 200
    assert r.get_json() == posts.post_list_payload()


def test_api_routes_take_precedence_over_ui(client):
    r = client.get("/api/posts/1")
    assert r.get_json()["body"] == "First ever post on this blog"


def test_encoding_failure_returns_internal_error(client, monkeypatch):
    monkeypatch.setattr(posts, "post_payload", lambda: {"id": object()})
    r = client.get("/api/posts/1")
    assert r.status_code == 500
    assert r.mimetype == "text/plain"
    assert r.data == b"Internal error\n"
