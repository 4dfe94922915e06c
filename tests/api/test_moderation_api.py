# mypy: ignore-errors
"""Tests for the admin moderation queue."""

from __future__ import annotations

import pytest
from fastapi import status

from patidestek.core.security import create_access_token
from patidestek.models import PostStatus, UserRole


def test_pending_queue_is_admin_only_and_fifo(client, auth_token, admin_token, make_post) -> None:
    make_post(title="İkinci başvuru", status=PostStatus.PENDING, age_minutes=5)
    make_post(title="İlk başvuru", status=PostStatus.PENDING, age_minutes=50)
    make_post(title="Zaten onaylı", age_minutes=100)

    assert client.get("/admin/posts/pending", headers=auth_token).status_code == status.HTTP_403_FORBIDDEN

    queue = client.get("/admin/posts/pending", headers=admin_token).json()
    assert [p["title"] for p in queue] == ["İlk başvuru", "İkinci başvuru"]
    assert queue[0]["owner"]["name"] == "Ayşe Yılmaz"


def test_approve_publishes_post(client, admin_token, make_post) -> None:
    post = make_post(status=PostStatus.PENDING)
    response = client.patch(f"/admin/posts/{post.id}/approve", headers=admin_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "APPROVED"

    assert client.get(f"/posts/{post.id}").status_code == status.HTTP_200_OK
    assert client.get("/posts").json()["total"] == 1


def test_reject_keeps_post_hidden_and_stores_reason(client, auth_token, admin_token, make_post) -> None:
    post = make_post(status=PostStatus.PENDING)
    response = client.patch(
        f"/admin/posts/{post.id}/reject",
        json={"reason": "Telefon numarası içeriyor"},
        headers=admin_token,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "REJECTED"

    assert client.get(f"/posts/{post.id}").status_code == status.HTTP_404_NOT_FOUND
    mine = client.get(f"/my/posts/{post.id}", headers=auth_token).json()
    assert mine["rejectionReason"] == "Telefon numarası içeriyor"


def test_reject_without_body(client, admin_token, make_post) -> None:
    post = make_post(status=PostStatus.PENDING)
    response = client.patch(f"/admin/posts/{post.id}/reject", headers=admin_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["rejectionReason"] is None


@pytest.mark.parametrize("action", ["approve", "reject"])
def test_only_pending_posts_can_be_moderated(client, admin_token, make_post, action: str) -> None:
    post = make_post(status=PostStatus.APPROVED)
    response = client.patch(f"/admin/posts/{post.id}/{action}", headers=admin_token)
    assert response.status_code == status.HTTP_409_CONFLICT


def test_moderating_missing_post_is_not_found(client, admin_token) -> None:
    assert client.patch("/admin/posts/999/approve", headers=admin_token).status_code == 404


def test_banned_admin_can_still_moderate(client, make_user, make_post) -> None:
    admin = make_user(name="Banned Admin", role=UserRole.ADMIN, is_banned=True)
    post = make_post(status=PostStatus.PENDING)
    headers = {"Authorization": f"Bearer {create_access_token(admin.id, 'ADMIN')}"}
    response = client.patch(f"/admin/posts/{post.id}/approve", headers=headers)
    assert response.status_code == status.HTTP_200_OK
