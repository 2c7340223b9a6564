import os
import pytest

os.environ["FLASK_ENV"] = "testing"

from tabela import create_app
from tabela.models.team import Club


@pytest.fixture(scope="session")
def app():
    app = create_app("testing")
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def cli_runner(app):
    return app.test_cli_runner()


@pytest.fixture
def make_clubs():
    """Factory: make_clubs(4) → [Club A, Club B, Club C, Club D]."""

    def _make(n):
        return [
            Club(id=f"club-{i + 1}", name=f"Club {i + 1}", abbreviation=f"C{i + 1:02d}")
            for i in range(n)
        ]

    return _make


@pytest.fixture
def roster_payload():
    """JSON roster as the club registry sends it."""

    def _payload(n):
        return [
            {"id": f"club-{i + 1}", "name": f"Club {i + 1}",
             "abbreviation": f"C{i + 1:02d}", "logoUrl": ""}
            for i in range(n)
        ]

    return _payload
