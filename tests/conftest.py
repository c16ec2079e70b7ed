import os

import pytest

from placeholder_taf import CommentEndpoint, RequestSpec, UserEndpoint, configure_logging, load_settings
from tests.utils.http_client import StubBackend

BASE_URL = "https://placeholder.test"
LIVE = os.getenv("PLACEHOLDER_LIVE") == "1"


def pytest_collection_modifyitems(config, items):
    if LIVE:
        return
    skip_live = pytest.mark.skip(reason="set PLACEHOLDER_LIVE=1 to run against the live backend")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def backend():
    return StubBackend()


@pytest.fixture
def stub_spec(backend):
    return RequestSpec(BASE_URL, timeout=5.0, session=backend.session)


@pytest.fixture(scope="session")
def settings():
    settings = load_settings()
    configure_logging(settings)
    return settings


@pytest.fixture(scope="session")
def spec(settings):
    with RequestSpec.from_settings(settings) as spec:
        yield spec


@pytest.fixture(scope="session")
def comment_endpoint(spec):
    return CommentEndpoint(spec)


@pytest.fixture(scope="session")
def user_endpoint(spec):
    return UserEndpoint(spec)
