"""HTTP tests for the blog routes."""

import pytest


def _create_post(client, title="My Test Post", content="Hello World"):
    response = client.post("/blog/posts", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()


def test_list_posts_empty(client):
    response = client.get("/blog/posts")
    assert response.status_code == 200
    assert response.json() == []


def test_create_post(client):
    post = _create_post(client)

    assert post["id"] == 1
    assert post["title"] == "My Test Post"
    assert post["content"] == "Hello World"
    assert "createdAt" in post and "updatedAt" in post


def test_create_post_requires_fields(client):
    response = client.post("/blog/posts", json={"title": "no content"})
    assert response.status_code == 422


def test_get_post_with_comments(client):
    post = _create_post(client)
    response = client.post(
        f"/blog/posts/{post['id']}/comments",
        json={"authorName": "Ann", "content": "Nice post"},
    )
    assert response.status_code == 201
    comment = response.json()
    assert comment["postId"] == post["id"]
    assert comment["authorName"] == "Ann"

    response = client.get(f"/blog/posts/{post['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["post"]["title"] == "My Test Post"
    assert [c["content"] for c in body["comments"]] == ["Nice post"]


def test_get_post_not_found(client):
    assert client.get("/blog/posts/42").status_code == 404


@pytest.mark.parametrize("raw_id", ["abc", "1_2", "%201"])
def test_get_post_invalid_id(client, raw_id):
    response = client.get(f"/blog/posts/{raw_id}")
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid ID"


def test_comment_on_missing_post(client):
    response = client.post("/blog/posts/9/comments", json={"authorName": "Ann", "content": "?"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Post not found"


def test_comment_invalid_post_id(client):
    response = client.post("/blog/posts/x/comments", json={"authorName": "Ann", "content": "?"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid Post ID"


def test_update_post(client):
    post = _create_post(client)

    response = client.put(f"/blog/posts/{post['id']}", json={"content": "Edited"})

    assert response.status_code == 200
    assert response.json()["title"] == "My Test Post"
    assert response.json()["content"] == "Edited"
    assert client.put("/blog/posts/99", json={"content": "x"}).status_code == 404


def test_delete_post(client):
    post = _create_post(client)

    assert client.delete(f"/blog/posts/{post['id']}").status_code == 204
    assert client.get(f"/blog/posts/{post['id']}").status_code == 404
    assert client.delete(f"/blog/posts/{post['id']}").status_code == 404
