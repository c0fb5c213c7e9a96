# tests/routes/test_blogs_api.py
"""End-to-end tests for the /api/blogs endpoints."""

from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any
from uuid import UUID, uuid4

from fastapi import status
from httpx import AsyncClient

from bloglist.managers.token_manager import create_access_token
from bloglist.models import BlogDB

NEW_BLOG = {
    "title": "Canonical string reduction",
    "author": "Edsger W. Dijkstra",
    "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
    "likes": 12,
}

type FetchBlogs = Callable[[], Awaitable[list[BlogDB]]]


class TestListBlogs:
    async def test_empty_store_returns_empty_list(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == []

    async def test_returns_all_blogs(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
    ) -> None:
        response = await client.get("/api/blogs")

        assert response.status_code == status.HTTP_200_OK
        titles = {blog["title"] for blog in response.json()}
        assert titles == {blog["title"] for blog in initial_blogs}

    async def test_blogs_expose_id_and_never_underscore_id(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
    ) -> None:
        response = await client.get("/api/blogs")

        for blog in response.json():
            assert blog["id"]
            assert "_id" not in blog

    async def test_blogs_embed_owner_summary(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
        initial_blogs: list[dict[str, Any]],
    ) -> None:
        response = await client.get("/api/blogs")

        for blog in response.json():
            assert blog["ownerId"] == root_user["id"]
            assert blog["user"] == {
                "id": root_user["id"],
                "username": "root",
                "name": "Superuser",
            }
            assert "passwordHash" not in blog["user"]
            assert "password_hash" not in blog["user"]


class TestCreateBlog:
    async def test_valid_blog_is_added(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
        root_headers: dict[str, str],
        initial_blogs: list[dict[str, Any]],
        fetch_blogs: FetchBlogs,
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=root_headers)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["title"] == NEW_BLOG["title"]
        assert body["likes"] == 12
        assert body["ownerId"] == root_user["id"]

        blogs = await fetch_blogs()
        assert len(blogs) == len(initial_blogs) + 1
        assert NEW_BLOG["title"] in [blog.title for blog in blogs]

    async def test_new_blog_id_is_recorded_on_owner(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=root_headers)
        blog_id = response.json()["id"]

        users = (await client.get("/api/users")).json()

        assert users[0]["blogIds"] == [blog_id]

    async def test_missing_likes_defaults_to_zero(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
    ) -> None:
        blog = {key: value for key, value in NEW_BLOG.items() if key != "likes"}

        response = await client.post("/api/blogs", json=blog, headers=root_headers)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["likes"] == 0

    async def test_invalid_likes_are_coerced_to_zero(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
    ) -> None:
        for likes in ("many", -3, None, True):
            response = await client.post(
                "/api/blogs",
                json={**NEW_BLOG, "likes": likes},
                headers=root_headers,
            )
            assert response.status_code == status.HTTP_201_CREATED
            assert response.json()["likes"] == 0

    async def test_numeric_string_likes_are_read_as_numbers(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={**NEW_BLOG, "likes": "5"},
            headers=root_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["likes"] == 5

    async def test_missing_title_is_rejected_and_store_unchanged(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        initial_blogs: list[dict[str, Any]],
        fetch_blogs: FetchBlogs,
    ) -> None:
        blog = {key: value for key, value in NEW_BLOG.items() if key != "title"}

        response = await client.post("/api/blogs", json=blog, headers=root_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "title" in response.json()["error"]
        assert len(await fetch_blogs()) == len(initial_blogs)

    async def test_blank_fields_are_rejected(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        fetch_blogs: FetchBlogs,
    ) -> None:
        for field in ("title", "author", "url"):
            response = await client.post(
                "/api/blogs",
                json={**NEW_BLOG, field: "   "},
                headers=root_headers,
            )
            assert response.status_code == status.HTTP_400_BAD_REQUEST

        assert await fetch_blogs() == []

    async def test_without_token_is_unauthorized(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
        fetch_blogs: FetchBlogs,
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"
        assert "error" in response.json()
        assert len(await fetch_blogs()) == len(initial_blogs)

    async def test_auth_is_checked_before_body(self, client: AsyncClient) -> None:
        response = await client.post("/api/blogs", json={})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_non_bearer_scheme_is_unauthorized(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": "Basic cm9vdDpzZWtyZXQ="},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_malformed_token_is_unauthorized(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "token invalid or expired"}

    async def test_expired_token_is_unauthorized(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
    ) -> None:
        token = create_access_token(
            user_id=UUID(root_user["id"]),
            username="root",
            expires_delta=timedelta(seconds=-10),
        )

        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_token_for_unknown_user_is_unauthorized(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "user not found"}


class TestDeleteBlog:
    async def test_owner_can_delete(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        initial_blogs: list[dict[str, Any]],
        fetch_blogs: FetchBlogs,
    ) -> None:
        blog_to_delete = initial_blogs[0]

        response = await client.delete(
            f"/api/blogs/{blog_to_delete['id']}",
            headers=root_headers,
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        remaining = await fetch_blogs()
        assert len(remaining) == len(initial_blogs) - 1
        assert blog_to_delete["id"] not in [str(blog.id) for blog in remaining]

    async def test_delete_removes_id_from_owner(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        initial_blogs: list[dict[str, Any]],
    ) -> None:
        deleted, kept = initial_blogs

        await client.delete(f"/api/blogs/{deleted['id']}", headers=root_headers)

        users = (await client.get("/api/users")).json()
        assert users[0]["blogIds"] == [kept["id"]]

    async def test_non_owner_cannot_delete(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
        make_user: Callable[..., Awaitable[tuple[dict[str, Any], dict[str, str]]]],
        fetch_blogs: FetchBlogs,
    ) -> None:
        _, other_headers = await make_user("mluukkai")
        blog_id = initial_blogs[0]["id"]

        response = await client.delete(f"/api/blogs/{blog_id}", headers=other_headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "only the creator can delete a blog"}
        assert blog_id in [str(blog.id) for blog in await fetch_blogs()]

    async def test_absent_id_is_a_no_op(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        initial_blogs: list[dict[str, Any]],
        fetch_blogs: FetchBlogs,
    ) -> None:
        response = await client.delete(f"/api/blogs/{uuid4()}", headers=root_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert len(await fetch_blogs()) == len(initial_blogs)

    async def test_without_token_is_unauthorized(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
        fetch_blogs: FetchBlogs,
    ) -> None:
        response = await client.delete(f"/api/blogs/{initial_blogs[0]['id']}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert len(await fetch_blogs()) == len(initial_blogs)

    async def test_malformed_id_is_bad_request(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
    ) -> None:
        response = await client.delete("/api/blogs/5a3d5da59070081a82a3445", headers=root_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "blog_id" in response.json()["error"]


class TestUpdateBlog:
    async def test_full_update_replaces_fields(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
    ) -> None:
        blog = initial_blogs[0]
        update = {**NEW_BLOG, "likes": blog["likes"] + 1}

        response = await client.put(f"/api/blogs/{blog['id']}", json=update)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["id"] == blog["id"]
        assert body["likes"] == blog["likes"] + 1
        assert body["title"] == NEW_BLOG["title"]
        assert body["ownerId"] == blog["ownerId"]

    async def test_update_needs_no_token(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
        fetch_blogs: FetchBlogs,
    ) -> None:
        blog = initial_blogs[1]

        response = await client.put(
            f"/api/blogs/{blog['id']}",
            json={**blog, "likes": 100},
        )

        assert response.status_code == status.HTTP_200_OK
        stored = {str(b.id): b for b in await fetch_blogs()}
        assert stored[blog["id"]].likes == 100

    async def test_omitted_fields_are_cleared(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
    ) -> None:
        blog = initial_blogs[0]

        response = await client.put(f"/api/blogs/{blog['id']}", json={"likes": 3})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["likes"] == 3
        assert body["title"] is None
        assert body["author"] is None
        assert body["url"] is None

    async def test_absent_id_returns_null(self, client: AsyncClient) -> None:
        response = await client.put(f"/api/blogs/{uuid4()}", json=NEW_BLOG)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None

    async def test_malformed_id_is_bad_request(self, client: AsyncClient) -> None:
        response = await client.put("/api/blogs/not-an-id", json=NEW_BLOG)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_negative_likes_are_rejected(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
    ) -> None:
        response = await client.put(
            f"/api/blogs/{initial_blogs[0]['id']}",
            json={**NEW_BLOG, "likes": -1},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "likes"
