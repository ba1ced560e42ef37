"""End-to-end tests for the posts and comments API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from hub.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client over a fresh in-memory store."""
    with TestClient(create_app(container=build_test_container())) as test_client:
        yield test_client


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPostLifecycle:
    """Walk a post through its whole life."""

    def test_transfer_news_scenario(self, client):
        """Post, comment once, upvote twice, then delete with the right key."""
        post_id = client.post(
            "/posts", json={"title": "Transfer news", "secret_key": "abc"}
        ).json()["post_id"]

        assert (
            client.post(f"/posts/{post_id}/comments", json={"content": "First!"}).status_code
            == 201
        )
        client.post(f"/posts/{post_id}/upvote")
        client.post(f"/posts/{post_id}/upvote")

        page = client.get(f"/posts/{post_id}").json()
        assert page["upvotes"] == 2
        assert [c["content"] for c in page["comments"]] == ["First!"]

        denied = client.request("DELETE", f"/posts/{post_id}", json={"secret_key": "wrong"})
        assert denied.status_code == 403
        assert client.get(f"/posts/{post_id}").status_code == 200

        deleted = client.request("DELETE", f"/posts/{post_id}", json={"secret_key": "abc"})
        assert deleted.status_code == 200
        assert client.get(f"/posts/{post_id}").status_code == 404


    def test_create_edit_comment_delete(self, client):
        """Post with key "abc", edit, comment, then delete with the key."""
        created = client.post(
            "/posts",
            json={
                "title": "Transfer news",
                "content": "Big signing",
                "secret_key": "abc",
                "flags": ["News"],
            },
        )
        assert created.status_code == 201
        post = created.json()
        assert post["upvotes"] == 0
        assert "secret_key" not in post
        post_id = post["post_id"]

        # Wrong key is refused and changes nothing
        refused = client.patch(
            f"/posts/{post_id}", json={"secret_key": "ABC", "title": "Hacked"}
        )
        assert refused.status_code == 403
        assert client.get(f"/posts/{post_id}").json()["title"] == "Transfer news"

        edited = client.patch(
            f"/posts/{post_id}", json={"secret_key": "abc", "title": "Transfer news!"}
        )
        assert edited.status_code == 200
        assert edited.json()["title"] == "Transfer news!"
        assert edited.json()["content"] == "Big signing"

        comment = client.post(f"/posts/{post_id}/comments", json={"content": "Wow"})
        assert comment.status_code == 201

        feed = client.get("/posts", params={"search": "transfer", "flag": "News"})
        assert feed.status_code == 200
        cards = feed.json()["posts"]
        assert [c["post_id"] for c in cards] == [post_id]
        assert cards[0]["comment_count"] == 1

        denied = client.request(
            "DELETE", f"/posts/{post_id}", json={"secret_key": "nope"}
        )
        assert denied.status_code == 403

        deleted = client.request("DELETE", f"/posts/{post_id}", json={"secret_key": "abc"})
        assert deleted.status_code == 200
        assert deleted.json()["success"] is True

        assert client.get(f"/posts/{post_id}").status_code == 404
        assert client.get(f"/posts/{post_id}/comments").json()["comments"] == []
        assert client.get("/posts").json()["total"] == 0

    def test_blank_title_is_rejected(self, client):
        response = client.post("/posts", json={"title": "  "})

        assert response.status_code == 400
        assert client.get("/posts").json()["total"] == 0

    def test_upvotes_accumulate(self, client):
        post_id = client.post("/posts", json={"title": "Vote"}).json()["post_id"]

        for _ in range(3):
            response = client.post(f"/posts/{post_id}/upvote")
            assert response.status_code == 200

        assert response.json()["upvotes"] == 3
        assert client.get(f"/posts/{post_id}").json()["upvotes"] == 3

    def test_sort_by_upvotes(self, client):
        first = client.post("/posts", json={"title": "First"}).json()["post_id"]
        second = client.post("/posts", json={"title": "Second"}).json()["post_id"]
        client.post(f"/posts/{first}/upvote")

        feed = client.get("/posts", params={"sort": "upvotes"}).json()

        assert [c["post_id"] for c in feed["posts"]] == [first, second]

    def test_unknown_flag_is_rejected(self, client):
        response = client.get("/posts", params={"flag": "Gossip"})

        assert response.status_code == 422


class TestComments:
    def test_blank_comment_is_a_no_op(self, client):
        post_id = client.post("/posts", json={"title": "Quiet"}).json()["post_id"]

        response = client.post(f"/posts/{post_id}/comments", json={"content": "   "})

        assert response.status_code == 204
        assert client.get(f"/posts/{post_id}/comments").json()["total"] == 0

    def test_comment_on_missing_post(self, client):
        response = client.post(f"/posts/{uuid4()}/comments", json={"content": "Hello"})

        assert response.status_code == 404

    def test_missing_post_actions(self, client):
        missing = uuid4()

        assert client.get(f"/posts/{missing}").status_code == 404
        assert client.post(f"/posts/{missing}/upvote").status_code == 404
        assert (
            client.patch(f"/posts/{missing}", json={"secret_key": "x"}).status_code
            == 404
        )


class TestEditEdgeCases:
    def test_null_flags_clear_categories(self, client):
        post_id = client.post(
            "/posts", json={"title": "Tagged", "flags": ["News", "Opinion"]}
        ).json()["post_id"]

        response = client.patch(
            f"/posts/{post_id}", json={"secret_key": "", "flags": None}
        )

        assert response.status_code == 200
        assert response.json()["flags"] == []
        assert client.get(f"/posts/{post_id}").json()["flags"] == []

    def test_null_title_is_rejected(self, client):
        post_id = client.post("/posts", json={"title": "Keep"}).json()["post_id"]

        response = client.patch(
            f"/posts/{post_id}", json={"secret_key": "", "title": None}
        )

        assert response.status_code == 400
        assert client.get(f"/posts/{post_id}").json()["title"] == "Keep"

    def test_long_title_is_accepted(self, client):
        response = client.post("/posts", json={"title": "x" * 301})

        assert response.status_code == 201
