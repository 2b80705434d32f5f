import os
import tempfile

import pytest

# Log files go to a scratch directory; must be set before restweb.main is imported.
os.environ.setdefault("RESTWEB_LOGS_DIR", tempfile.mkdtemp(prefix="restweb-logs-"))

from fastapi.testclient import TestClient

from restweb.main import app


@pytest.fixture
def client():
    return TestClient(app)
