# Tests
import httpx
import pytest

from repo_files.domain.exceptions import ConfigurationError
from repo_files.infrastructure.config import Settings, get_settings
from repo_files.infrastructure.github_contents_adapter import RepositoryFileAdapter
from repo_files.interface.app import create_app
from repo_files.interface.dependencies import build_file_store


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/notes")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Wiring Tests
class TestBuildFileStore:

    def test_binds_configured_repository(self):
        settings = Settings(_env_file=None, github_token="ghp_test_12345", github_branch="drafts")
        store = build_file_store(httpx.AsyncClient(), settings)
        assert isinstance(store, RepositoryFileAdapter)
        assert store.repository.full_name == "octo/notes"

    def test_bad_token_is_fatal(self):
        settings = Settings(_env_file=None, github_token="not a token")
        with pytest.raises(ConfigurationError):
            build_file_store(httpx.AsyncClient(), settings)

    def test_bad_repository_is_fatal(self):
        settings = Settings(_env_file=None, github_token="x", github_repository="just-a-name")
        with pytest.raises(ConfigurationError):
            build_file_store(httpx.AsyncClient(), settings)


# Lifespan Tests
class TestLifespan:

    @pytest.mark.asyncio
    async def test_stores_adapter_on_app_state(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_12345")
        app = create_app()
        async with app.router.lifespan_context(app):
            assert isinstance(app.state.file_store, RepositoryFileAdapter)
        assert app.state.file_store is None

    @pytest.mark.asyncio
    async def test_refuses_to_start_with_bad_token(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "not a token")
        app = create_app()
        with pytest.raises(ConfigurationError):
            async with app.router.lifespan_context(app):
                pass
