"""End-to-end tests for post and comment endpoints."""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from blog.config import Settings
from blog.domain.repository import PostRepository
from blog.interface.api.app import create_app
from blog.util.di.container import setup_di
from blog.util.jwt import create_token
from tests.conftest import make_chain, make_post
from tests.di import build_test_container


@pytest.fixture
def test_container():
    return build_test_container()


@pytest.fixture
def client(test_container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def seed_post(test_container, post):
    """Store a post directly in the in-memory repository."""

    async def _save():
        post_repo = await test_container.get(PostRepository)
        return await post_repo.save(post)

    return asyncio.run(_save())


def auth(email: str) -> dict[str, str]:
    """Cookies for a request made as ``email``."""
    return {"auth_token": create_token(email, Settings().auth)}


def create_post(client, email: str = "owner@x.com") -> dict:
    response = client.post(
        "/posts",
        json={"title": "Threads", "content": "Discuss."},
        cookies=auth(email),
    )
    assert response.status_code == 201
    return response.json()


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200


class TestCommentEndpoints:
    """End-to-end tests for /posts/{post_id}/comments."""

    def test_add_comment_without_cookie_is_401(self, client):
        """Should return 401 when no auth_token cookie is provided."""
        # Act
        response = client.post(f"/posts/{uuid4()}/comments", json={"content": "Hi"})

        # Assert
        assert response.status_code == 401

    def test_add_comment_with_invalid_token_is_401(self, client):
        response = client.post(
            f"/posts/{uuid4()}/comments",
            json={"content": "Hi"},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_add_comment_to_unknown_post_is_404(self, client):
        response = client.post(
            f"/posts/{uuid4()}/comments",
            json={"content": "Hi"},
            cookies=auth("a@x.com"),
        )

        assert response.status_code == 404

    def test_empty_comment_is_rejected(self, client):
        post = create_post(client)

        response = client.post(
            f"/posts/{post['post_id']}/comments",
            json={"content": ""},
            cookies=auth("a@x.com"),
        )

        assert response.status_code == 422

    def test_comment_reply_and_delete_flow(self, client):
        """Comment, reply, then delete the comment with its reply."""
        # Arrange
        post = create_post(client)
        post_id = post["post_id"]

        # Act - comment
        response = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "First!"},
            cookies=auth("a@x.com"),
        )
        assert response.status_code == 201
        comment = response.json()["comments"][0]

        # Act - reply
        response = client.post(
            f"/posts/{post_id}/comments/{comment['comment_id']}/replies",
            json={"content": "hi"},
            cookies=auth("b@x.com"),
        )
        assert response.status_code == 201
        data = response.json()
        assert data["comment_count"] == 2
        reply = data["comments"][1]
        assert reply["parent_id"] == comment["comment_id"]
        assert reply["depth"] == 1
        assert reply["content"] == "hi"
        assert "author_email" not in reply
        assert "@x.com" not in response.text

        # Act - someone else tries to delete the comment
        response = client.delete(
            f"/posts/{post_id}/comments/{comment['comment_id']}", cookies=auth("b@x.com")
        )
        assert response.status_code == 403

        # Act - the author deletes it
        response = client.delete(
            f"/posts/{post_id}/comments/{comment['comment_id']}", cookies=auth("a@x.com")
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["comments"] == []

        response = client.get(f"/posts/{post_id}")
        assert response.status_code == 200
        assert response.json()["comment_count"] == 0

    def test_delete_reply(self, client):
        # Arrange
        post_id = create_post(client)["post_id"]
        comment = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "Question"},
            cookies=auth("a@x.com"),
        ).json()["comments"][0]
        reply = client.post(
            f"/posts/{post_id}/comments/{comment['comment_id']}/replies",
            json={"content": "Answer"},
            cookies=auth("b@x.com"),
        ).json()["comments"][1]

        # Act
        forbidden = client.delete(
            f"/posts/{post_id}/comments/{comment['comment_id']}/replies/{reply['comment_id']}",
            cookies=auth("a@x.com"),
        )
        response = client.delete(
            f"/posts/{post_id}/comments/{comment['comment_id']}/replies/{reply['comment_id']}",
            cookies=auth("b@x.com"),
        )

        # Assert
        assert forbidden.status_code == 403
        assert response.status_code == 200
        assert response.json()["comment_count"] == 1


class TestPostEndpoints:
    """End-to-end tests for /posts."""

    def test_get_unknown_post_is_404(self, client):
        response = client.get(f"/posts/{uuid4()}")

        assert response.status_code == 404

    def test_create_post_without_cookie_is_401(self, client):
        response = client.post("/posts", json={"title": "T", "content": "C"})

        assert response.status_code == 401

    def test_create_post_with_bad_image_is_400(self, client):
        response = client.post(
            "/posts",
            json={"title": "T", "content": "C", "image": "not base64!"},
            cookies=auth("owner@x.com"),
        )

        assert response.status_code == 400

    def test_update_and_delete_by_author_only(self, client):
        """Only the author edits or deletes the post."""
        # Arrange
        post_id = create_post(client)["post_id"]
        body = {"title": "Edited", "content": "Edited body"}

        # Act & Assert
        assert client.put(f"/posts/{post_id}", json=body, cookies=auth("x@x.com")).status_code == 403

        response = client.put(f"/posts/{post_id}", json=body, cookies=auth("owner@x.com"))
        assert response.status_code == 200
        assert response.json()["title"] == "Edited"

        assert client.delete(f"/posts/{post_id}", cookies=auth("x@x.com")).status_code == 403
        assert client.delete(f"/posts/{post_id}", cookies=auth("owner@x.com")).status_code == 204
        assert client.get(f"/posts/{post_id}").status_code == 404

    def test_list_posts(self, client):
        create_post(client, "a@x.com")
        create_post(client, "b@x.com")

        response = client.get("/posts", params={"limit": 1})

        assert response.status_code == 200
        assert len(response.json()["posts"]) == 1


class TestDeepThreads:
    """End-to-end tests for threads far deeper than any nesting limit."""

    DEPTH = 10_000

    def test_get_post_with_deep_chain(self, client, test_container):
        """A 10,000-deep reply chain is served as a flat list."""
        # Arrange
        post = seed_post(test_container, make_post(comments=make_chain(self.DEPTH)))

        # Act
        response = client.get(f"/posts/{post.id}")

        # Assert
        assert response.status_code == 200
        comments = response.json()["comments"]
        assert len(comments) == self.DEPTH
        assert comments[0]["parent_id"] is None
        assert comments[-1]["depth"] == self.DEPTH - 1
        assert comments[-1]["parent_id"] == comments[-2]["comment_id"]

    def test_reply_at_bottom_of_deep_chain(self, client, test_container):
        """Replying under the deepest comment succeeds and reports success."""
        # Arrange
        post = seed_post(test_container, make_post(comments=make_chain(self.DEPTH)))
        deepest = client.get(f"/posts/{post.id}").json()["comments"][-1]

        # Act
        response = client.post(
            f"/posts/{post.id}/comments/{deepest['comment_id']}/replies",
            json={"content": "Still here"},
            cookies=auth("b@x.com"),
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["comment_count"] == self.DEPTH + 1
        assert data["comments"][-1]["content"] == "Still here"
        assert data["comments"][-1]["depth"] == self.DEPTH
