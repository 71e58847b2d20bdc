import os
import sys

# Test settings must be in the environment before messaging.config is imported
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = ""
os.environ["REDIS_ENABLED"] = "false"
os.environ["EVENTS_PROVIDER"] = "none"
os.environ["JWT_SECRET"] = "test-secret-for-messaging-service-0123456789"
os.environ["JWT_ISSUER"] = "messaging-test"

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

import pytest
from fastapi.testclient import TestClient

from messaging.config.settings import TestingConfig
from messaging.fastapi_app import create_fastapi_app
from messaging.setup.ioc.container import create_container

from fakes import Services
from jwt_generation import bearer


@pytest.fixture()
def services():
    """All handlers over in-memory repositories, a fake cache and a recording publisher."""
    return Services()


@pytest.fixture()
def test_config(tmp_path):
    """TestingConfig with uploads under tmp_path and a 1 KiB upload limit."""
    return type(
        "TmpStorageConfig",
        (TestingConfig,),
        {
            "FILE_STORAGE_PROVIDER": "local",
            "FILE_STORAGE_LOCAL_PATH": str(tmp_path / "uploads"),
            "FILE_STORAGE_MAX_SIZE": 1024,
        },
    )


@pytest.fixture()
def app(test_config):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(create_container(test_config))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs the lifespan)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth_headers():
    """Authentication headers with valid JWT token for user-1."""
    return bearer("user-1")


@pytest.fixture()
def other_headers():
    """Authentication headers for a second user, user-2."""
    return bearer("user-2")
