"""Shared pytest fixtures for nipsearch tests."""

import json

import pytest


# ============================================================================
# Auto-mark tests based on directory
# ============================================================================

def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        test_path = str(item.fspath)

        if '/tests/unit/' in test_path or '\\tests\\unit\\' in test_path:
            item.add_marker(pytest.mark.unit)
        elif '/tests/integration/' in test_path or '\\tests\\integration\\' in test_path:
            item.add_marker(pytest.mark.integration)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep config and interaction logs out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.setenv("NIPSEARCH_INTERACTION_LOG", "0")
    monkeypatch.setattr("nipsearch.cli.interaction_logger.interaction_logger._disabled", True)
    yield tmp_path


@pytest.fixture
def config_file(isolated_env):
    """Path of the default config file inside the isolated config dir."""
    return isolated_env / "config" / "nipsearch" / "config.yaml"


# ============================================================================
# Sample Data Fixtures
# ============================================================================

@pytest.fixture
def pubkeys():
    """Two well-formed hex public keys."""
    return ["a" * 64, "b" * 64]


# ============================================================================
# Output Capture Helpers
# ============================================================================

@pytest.fixture
def capture_json_output(capsys):
    """Helper to capture and parse JSON output."""
    def _capture():
        captured = capsys.readouterr()
        try:
            return json.loads(captured.out)
        except json.JSONDecodeError:
            return {"raw": captured.out, "error": "Not valid JSON"}
    return _capture


# ============================================================================
# CLI Runner Fixture
# ============================================================================

@pytest.fixture
def cli_runner():
    """Provide Click's CliRunner for testing CLI commands."""
    from click.testing import CliRunner
    return CliRunner()
