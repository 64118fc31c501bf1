"""Fixtures serving the FastAPI app over an in-process transport."""

import httpx
import pytest_asyncio

from board.domain.repository import PostRepository
from board.interface.api.app import create_app
from board.util.di.container import setup_di
from tests.conftest import make_post
from tests.di import build_test_container


@pytest_asyncio.fixture
async def served_app():
    """App wired to a fresh mock container, plus one seeded post.

    Yields:
        (ASGI transport for the app, seeded post)
    """
    test_container = build_test_container()
    app_instance = create_app()
    setup_di(app_instance, test_container)

    post_repo = await test_container.get(PostRepository)
    post = await post_repo.save(make_post("Seeded post"))

    yield httpx.ASGITransport(app=app_instance), post

    await test_container.close()


@pytest_asyncio.fixture
async def api_env(served_app):
    """Raw HTTP client against the served app."""
    transport, post = served_app
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client, post
