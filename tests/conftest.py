import pytest

from app import app as flask_app
from models import PlannerState


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    flask_app.extensions["planner"] = PlannerState()
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def planner(app):
    return app.extensions["planner"]
