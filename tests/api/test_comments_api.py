# mypy: ignore-errors
"""Tests for listing comments."""

from __future__ import annotations

from fastapi import status

from patidestek.models import Comment, PostStatus


def test_comment_thread_is_oldest_first(client, auth_token, other_auth_token, make_post) -> None:
    post = make_post()
    first = client.post(f"/posts/{post.id}/comments", json={"content": "  Gördüm sanırım  "}, headers=other_auth_token)
    assert first.status_code == status.HTTP_201_CREATED
    assert first.json()["content"] == "Gördüm sanırım"
    assert first.json()["postId"] == post.id
    client.post(f"/posts/{post.id}/comments", json={"content": "Teşekkürler!"}, headers=auth_token)

    thread = client.get(f"/posts/{post.id}/comments").json()
    assert [c["content"] for c in thread] == ["Gördüm sanırım", "Teşekkürler!"]
    assert thread[0]["user"]["name"] == "Mehmet Kaya"


def test_comments_require_approved_post(client, auth_token, make_post) -> None:
    post = make_post(status=PostStatus.PENDING)
    assert client.get(f"/posts/{post.id}/comments").status_code == status.HTTP_404_NOT_FOUND
    response = client.post(f"/posts/{post.id}/comments", json={"content": "Merhaba"}, headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/posts/999/comments").status_code == status.HTTP_404_NOT_FOUND


def test_blank_comment_is_rejected(client, auth_token, make_post) -> None:
    post = make_post()
    response = client.post(f"/posts/{post.id}/comments", json={"content": "   "}, headers=auth_token)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_banned_user_cannot_comment(client, banned_token, make_post) -> None:
    post = make_post()
    response = client.post(f"/posts/{post.id}/comments", json={"content": "Merhaba"}, headers=banned_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_delete_comment_permissions(client, auth_token, other_auth_token, admin_token, make_post, db_session) -> None:
    post = make_post()
    mine = client.post(f"/posts/{post.id}/comments", json={"content": "Benim yorumum"}, headers=auth_token).json()
    theirs = client.post(f"/posts/{post.id}/comments", json={"content": "Onun yorumu"}, headers=other_auth_token).json()

    forbidden = client.delete(f"/comments/{theirs['id']}", headers=auth_token)
    assert forbidden.status_code == status.HTTP_403_FORBIDDEN

    assert client.delete(f"/comments/{mine['id']}", headers=auth_token).status_code == status.HTTP_200_OK
    assert client.delete(f"/comments/{theirs['id']}", headers=admin_token).status_code == status.HTTP_200_OK
    assert client.delete(f"/comments/{theirs['id']}", headers=admin_token).status_code == status.HTTP_404_NOT_FOUND
    assert db_session.query(Comment).count() == 0


def test_deleting_post_removes_its_comments(client, auth_token, make_post, db_session) -> None:
    post = make_post()
    client.post(f"/posts/{post.id}/comments", json={"content": "Silinecek"}, headers=auth_token)

    client.delete(f"/posts/{post.id}", headers=auth_token)
    assert db_session.query(Comment).count() == 0
