"""
Shared pytest fixtures: a throwaway site on disk, settings and a test client.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import website.server
from website.core.config import Settings
from website.core.site import SiteConfig
from website.main import create_app


def pytest_configure(config: pytest.Config) -> None:
    """Register project markers to prevent unknown marker warnings."""
    markers = {
        "unit": "Unit tests that should execute quickly.",
        "integration": "Integration tests starting a real process.",
    }
    for name, description in markers.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def make_site(base: Path) -> Path:
    """Create ``public`` and ``view`` under ``base`` with a few pages."""
    public = base / "public"
    view = base / "view"
    (public / "css").mkdir(parents=True)
    (view / "docs").mkdir(parents=True)
    (public / "css" / "style.css").write_text("body { color: black; }")
    (public / "robots.txt").write_text("User-agent: *\n")
    (view / "_layout.html").write_text("<title>{{ site.domain }}</title>{% block content %}{% endblock %}")
    (view / "index.html").write_text('{% extends "_layout.html" %}{% block content %}home of {{ site.domain }}{% endblock %}')
    (view / "about.html").write_text("about page ({{ page }})")
    (view / "docs" / "index.html").write_text("docs index")
    return base


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    return make_site(tmp_path)


@pytest.fixture
def site_config(site_dir: Path) -> SiteConfig:
    return SiteConfig(domain="marak.com", root=site_dir / "public", view=site_dir / "view")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        ENVIRONMENT="development",
        HOST="127.0.0.1",
        PORT=8081,
        LOG_LEVEL="info",
        RATE_LIMIT="1000/minute",
    )


@pytest.fixture
def client(site_config: SiteConfig, settings: Settings) -> TestClient:
    app = create_app(site_config, settings)
    return TestClient(app, base_url="http://marak.com")


@pytest.fixture(autouse=True)
def reset_spawn(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(website.server, "_spawned", False)
