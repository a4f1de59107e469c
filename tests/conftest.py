"""Shared test fixtures for the portal UI."""

from __future__ import annotations

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import Callable
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import authserver.models  # noqa: F401
from authserver.core.config import Settings
from authserver.core.database import Base
from authserver.models import Network
from authserver.services.nodes import OwnershipFilter
from authserver.services.users import CurrentUser
from portalui.context import PortalContext
from portalui.session import PortalSession
from portalui.templating import TEMPLATES_DIR, TemplateRenderer

TEST_SECRET_KEY = "test-secret-key-with-at-least-32-characters"


class RecordingRenderer(TemplateRenderer):
    """Real Jinja2 rendering, with every call's variables kept for asserts."""

    def __init__(self, settings: Settings) -> None:
        super().__init__([TEMPLATES_DIR, str(settings.content_dir)])
        self.fetched: list[tuple[str, dict[str, Any]]] = []
        self.displayed: list[tuple[str, dict[str, Any]]] = []

    def fetch(self, template_name: str, variables: dict[str, Any]) -> str:
        self.fetched.append((template_name, dict(variables)))
        return super().fetch(template_name, variables)

    def display(self, request, template_name, variables, status_code=200):
        self.displayed.append((template_name, dict(variables)))
        return super().display(request, template_name, variables, status_code=status_code)

    def fetched_names(self) -> list[str]:
        return [name for name, _ in self.fetched]

    def last_fetch(self, template_name: str) -> dict[str, Any]:
        for name, variables in reversed(self.fetched):
            if name == template_name:
                return variables
        raise AssertionError(f"{template_name} was never rendered")


class FakeNodeSelector:
    def __init__(self) -> None:
        self.calls: list[tuple[str, OwnershipFilter]] = []

    async def render(self, param_name: str, ownership: OwnershipFilter) -> str:
        self.calls.append((param_name, ownership))
        return f'<select name="{param_name}" id="node_select"></select>'


class FakeNetworkSelector:
    def __init__(self) -> None:
        self.calls: list[str] = []

    async def render(self, param_name: str) -> str:
        self.calls.append(param_name)
        return f'<select name="{param_name}" id="network_select"></select>'


# -----------------------------------------------------------------------------

@pytest.fixture
def test_settings(tmp_path) -> Settings:
    content = tmp_path / "content"
    (content / "default").mkdir(parents=True)
    (content / "default" / "stylesheet.css").write_text("body { color: black; }\n")
    return Settings(
        _env_file=None,
        secret_key=TEST_SECRET_KEY,
        environment="testing",
        database_url="sqlite+aiosqlite:///:memory:",
        content_dir=content,
        available_locales={"fr": "Français", "en": "English", "de": "Deutsch"},
        default_locale="fr",
    )


@pytest.fixture
def network() -> Network:
    return Network(
        name="Ile sans fil",
        homepage_url="http://www.ilesansfil.org/",
        tech_support_email="tech@ilesansfil.org",
    )


@pytest.fixture
def renderer(test_settings: Settings) -> RecordingRenderer:
    return RecordingRenderer(test_settings)


@pytest.fixture
def node_selector() -> FakeNodeSelector:
    return FakeNodeSelector()


@pytest.fixture
def network_selector() -> FakeNetworkSelector:
    return FakeNetworkSelector()


@pytest.fixture
def make_context(
    test_settings: Settings,
    network: Network,
    node_selector: FakeNodeSelector,
    network_selector: FakeNetworkSelector,
) -> Callable[..., PortalContext]:
    def _make(
        user: CurrentUser | None = None,
        params: dict[str, str] | None = None,
        session: dict[str, str] | None = None,
        locale: str = "",
        request_uri: str = "/",
    ) -> PortalContext:
        return PortalContext(
            request=None,
            settings=test_settings,
            user=user,
            network=network,
            session=PortalSession(session or {}),
            params=params or {},
            locale=locale,
            request_uri=request_uri,
            node_selector=node_selector,
            network_selector=network_selector,
        )

    return _make


@pytest.fixture
def super_admin() -> CurrentUser:
    return CurrentUser(id="u-admin", username="root", super_admin=True)


@pytest.fixture
def owner() -> CurrentUser:
    return CurrentUser(id="u-owner", username="hotspot_owner", owned_nodes=2)


@pytest.fixture
def plain_user() -> CurrentUser:
    return CurrentUser(id="u-plain", username="alice")


@pytest.fixture
def nobody() -> CurrentUser:
    return CurrentUser(id="u-splash", username="SPLASH_ONLY_USER", nobody=True)


# -----------------------------------------------------------------------------

@pytest.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()
