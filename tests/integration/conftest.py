"""Fixtures for tests that exercise the assembled application."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def app_client():
    from app import app

    return TestClient(app, raise_server_exceptions=False)
