"""Shared test fixtures for Diff Insight tests."""

import os

import pytest

from diff_insight.engine import InsightEngine
from diff_insight.theme import DEFAULT_THEME, set_color_enabled, set_theme


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def reset_theme():
    """Every test starts and ends on the default, colored theme."""
    set_theme(DEFAULT_THEME)
    set_color_enabled(True)
    yield
    set_theme(DEFAULT_THEME)
    set_color_enabled(True)


@pytest.fixture
def plain_engine():
    """Engine rendering through the mono theme, so output is plain text."""
    set_theme("mono")
    return InsightEngine()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point config discovery at an empty home and project directory."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in list(os.environ):
        if key.startswith("DIFF_INSIGHT_"):
            monkeypatch.delenv(key)
    return project


@pytest.fixture
def es6_diff():
    """var -> const rewrite with file headers."""
    return (
        "--- a/src/app.js\n"
        "+++ b/src/app.js\n"
        "@@ -1,2 +1,2 @@\n"
        "-var total = 0;\n"
        "+const total = 0;\n"
        " module.exports = total;\n"
    )
