# backend/tests/conftest.py
import os
import sys
import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
TESTS_DIR = os.path.abspath(os.path.dirname(__file__))
for p in (BACKEND_DIR, TESTS_DIR):
    if p not in sys.path:
        sys.path.insert(0, p)

# Never hit public OSRM/Nominatim from tests
os.environ.setdefault("OSRM_BASE_URL", "http://osrm.test")
os.environ.setdefault("NOMINATIM_BASE_URL", "http://nominatim.test")
os.environ.setdefault("EMISSION_FACTORS_FILE", "")

# Import app only after setting env
from main import app
from api.dependencies import get_planner
from services.emissions.factors import EmissionFactorTable


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture
def factor_table():
    return EmissionFactorTable.seed()


@pytest.fixture
def override_planner():
    """Swap the planner dependency for one wired to in-memory collaborators."""

    def _install(planner):
        app.dependency_overrides[get_planner] = lambda: planner
        return planner

    yield _install
    app.dependency_overrides.pop(get_planner, None)
