import pytest
from fastapi.testclient import TestClient

from fldserde.api.main import app
from fldserde.core.format.compiler import compile_descriptor
from fldserde.core.observability.metrics import reset_metrics


@pytest.fixture(autouse=True)
def _reset_named_metrics():
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture()
def sample_descriptor():
    return compile_descriptor("FL2#FL10#DM|#DM,#FL20", 5)


@pytest.fixture()
def client():
    return TestClient(app)
