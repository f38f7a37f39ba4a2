"""Pytest configuration and fixtures."""

import os
import sys
import typing as t
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# keep the default app away from the repo's data dir
here = Path(__file__).parent
os.environ.setdefault("SCORES_FILE", str(here / ".scores.test.json"))

sys.path.insert(
    0,
    os.path.abspath(os.path.join(os.path.dirname(__file__), "..")),
)

# Import after path setup - pylint: disable=wrong-import-position
from topscores.main import create_app  # noqa: E402


@pytest.fixture
def scores_path(tmp_path: Path) -> Path:
    """Per-test scores file location (not created).

    :return: Path inside the test's temp dir.
    """
    return tmp_path / "scores.json"


@pytest.fixture
def app(scores_path: Path) -> FastAPI:
    """Provide an app persisting to the per-test scores file.

    :return: Configured application.
    """
    return create_app(scores_file=scores_path)


@pytest.fixture
def client(app: FastAPI) -> t.Generator[TestClient, None, None]:
    """Provide test client for API testing.

    :return: Test client generator.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
