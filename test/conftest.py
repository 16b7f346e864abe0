"""Shared pytest fixtures for the Pwguard test suite."""

import pytest

from pwguard.app import create_app
from pwguard.config.app_config import AppConfig


@pytest.fixture
def app(tmp_path):
    config = AppConfig.for_testing(log_dir=tmp_path / "logs")
    return create_app(config)


@pytest.fixture
def client(app):
    return app.test_client()
