"""End-to-end tests for the video and comment endpoints."""

import pytest
from fastapi.testclient import TestClient

from threadline.interface.api.app import create_app
from threadline.util.di.container import setup_di
from tests.di import TEST_DISPLAY_NAME, build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def register_video(client) -> str:
    response = client.post("/videos", json={"content": "https://videos.example/1"})
    assert response.status_code == 201
    return response.json()["video_ref"]


def create_comment(client, text: str = "hi") -> dict:
    video_ref = register_video(client)
    response = client.post(f"/videos/{video_ref}/comments", json={"text": text})
    assert response.status_code == 201
    return response.json()["comment"]


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        """Service should report healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCommentFlow:
    """End-to-end comment thread flow."""

    def test_full_thread(self, client):
        """Comment, reply, then read the thread back."""
        # Comment on a video
        comment = create_comment(client)
        assert comment["owner"] == TEST_DISPLAY_NAME
        assert comment["is_root_comment"] is True
        assert comment["num_replies"] == 0
        comment_ref = comment["comment_ref"]

        # Reply
        response = client.post(
            f"/comments/{comment_ref}/replies", json={"text": "nice video"}
        )
        assert response.status_code == 201
        reply = response.json()["reply"]
        assert reply["parent_ref"] == comment_ref
        assert reply["is_root_comment"] is False
        assert reply["parent_version"] == 0

        # Read the parent
        response = client.get(f"/comments/{comment_ref}")
        assert response.status_code == 200
        data = response.json()
        assert data["comment"]["num_replies"] == 1
        assert data["parent_stale"] is False

        # List replies
        response = client.get(f"/comments/{comment_ref}/replies")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["replies"][0]["comment_ref"] == reply["comment_ref"]

        # Read one reply
        response = client.get(f"/comments/{comment_ref}/replies/0")
        assert response.status_code == 200
        assert response.json()["reply"]["text"] == "nice video"

    def test_reply_index_out_of_range(self, client):
        """Asking past the end of the reply list should be 404."""
        comment = create_comment(client)

        response = client.get(f"/comments/{comment['comment_ref']}/replies/5")

        assert response.status_code == 404

    def test_video_is_not_a_comment(self, client):
        """A video ref does not resolve as a comment."""
        video_ref = register_video(client)

        response = client.get(f"/comments/{video_ref}")

        assert response.status_code == 404

    def test_invalid_ref(self, client):
        """A ref that is not URL-safe base64 should be 400."""
        response = client.get("/comments/!!!")

        assert response.status_code == 400

    def test_comment_on_invalid_video_ref(self, client):
        """Commenting through a bad video ref should be 400."""
        response = client.post("/videos/a=b/comments", json={"text": "hi"})

        assert response.status_code == 400

    def test_comment_on_garbage_identifier(self, client):
        """A well-formed ref whose bytes are not an identifier should be 422."""
        # "aGVsbG8" decodes to b"hello"
        response = client.post("/videos/aGVsbG8/comments", json={"text": "hi"})

        assert response.status_code == 422

    def test_get_video(self, client):
        """A registered video should be readable by its ref."""
        video_ref = register_video(client)

        response = client.get(f"/videos/{video_ref}")

        assert response.status_code == 200
        assert response.json()["content"] == "https://videos.example/1"

    def test_comment_is_not_a_video(self, client):
        """A comment ref does not resolve as a video."""
        comment = create_comment(client)

        response = client.get(f"/videos/{comment['comment_ref']}")

        assert response.status_code == 404

    def test_register_empty_video(self, client):
        """Empty video content is rejected by request validation."""
        response = client.post("/videos", json={"content": ""})

        assert response.status_code == 422
