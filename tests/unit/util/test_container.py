"""Unit tests for settings and container wiring."""

import pytest

from hub.config import Settings
from hub.domain.repository import PostRepository
from hub.persistence.repository.inmemory import InMemoryPostRepository
from hub.util.di import (
    InMemoryPersistenceProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from hub.util.di.container import create_container
from tests.di import build_test_container


class TestSettings:
    def test_nested_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE__BACKEND", "memory")
        monkeypatch.setenv("FEED__PREVIEW_WORDS", "40")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/hub")

        settings = Settings()

        assert settings.persistence.backend == "memory"
        assert settings.feed.preview_words == 40
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/hub"


class TestGetProvider:
    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_mockable_component_selection(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert (
            get_provider(PersistenceProvider, use_mock=True)
            is InMemoryPersistenceProvider
        )


class TestContainers:
    @pytest.mark.asyncio
    async def test_memory_backend_uses_in_memory_store(self):
        container = create_container(Settings(persistence={"backend": "memory"}))

        async with container() as request_container:
            repo = await request_container.get(PostRepository)

        assert isinstance(repo, InMemoryPostRepository)
        await container.close()

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})
