"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

from setminify.utils.config import (
    AppConfig,
    AssetPathsConfig,
    AssetSetConfig,
    Settings,
)

ASSETS_YML = """\
js:
  base:
    - a.js
    - b.js
css:
  screen: "*.css"
"""


@pytest.fixture(autouse=True)
def set_test_environment(monkeypatch):
    """Keep ambient configuration out of the tests."""
    for var in (
        "SETMINIFY_ROOT_PATH",
        "SETMINIFY_ASSETS_FILE",
        "SETMINIFY_MINIFY",
        "SETMINIFY_LOG_LEVEL",
        "SETMINIFY_DEVELOPMENT",
        "SETMINIFY_JS_PATH",
        "SETMINIFY_CSS_PATH",
        "SETMINIFY_JS_URL",
        "SETMINIFY_CSS_URL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("setminify.utils.config.settings", None)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by a test."""
    yield
    structlog.reset_defaults()


def write(path: Path, content: str) -> Path:
    """Write a file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    """Return a helper that writes a file, creating parent directories."""
    return write


@pytest.fixture
def js_dir(tmp_path) -> Path:
    """Return the script root of the temporary project."""
    path = tmp_path / "public" / "js"
    path.mkdir(parents=True, exist_ok=True)
    return path.resolve()


@pytest.fixture
def css_dir(tmp_path) -> Path:
    """Return the style root of the temporary project."""
    path = tmp_path / "public" / "css"
    path.mkdir(parents=True, exist_ok=True)
    return path.resolve()


@pytest.fixture
def make_settings(tmp_path) -> Callable[..., Settings]:
    """Return a factory for settings rooted at the temporary project."""

    def factory(minify: bool = False, **paths: str) -> Settings:
        return Settings(
            app=AppConfig(root_path=tmp_path, minify=minify),
            paths=AssetPathsConfig(**paths),
        )

    return factory


@pytest.fixture
def asset_config() -> AssetSetConfig:
    """Return a small asset set configuration."""
    return AssetSetConfig.from_mapping(
        {"js": {"base": ["a.js", "b.js"]}, "css": {"screen": "*.css"}}
    )


@pytest.fixture
def project(tmp_path, js_dir, css_dir) -> Path:
    """Create a project with a config file and sources for every set."""
    write(tmp_path / "config" / "assets.yml", ASSETS_YML)
    write(js_dir / "a.js", "var a = 1;")
    write(js_dir / "b.js", "var b = 2;")
    write(css_dir / "layout.css", ".a { color: red; }\n")
    write(css_dir / "print.css", "/* print */\n.b{margin:0;}\n")
    return tmp_path
