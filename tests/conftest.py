"""Shared fixtures for the Confluence publisher test suite."""

from unittest.mock import patch

import pytest

from confluence_publisher.confluence import ConfluenceConfig, ConfluenceFetcher
from confluence_publisher.servers.dependencies import reset_confluence_fetcher
from tests.utils.factories import AuthConfigFactory
from tests.utils.mocks import MockEnvironment, StubConfluenceRemote


def pytest_addoption(parser):
    parser.addoption(
        "--use-real-data",
        action="store_true",
        default=False,
        help="Run tests against the Confluence site configured in the environment",
    )


@pytest.fixture
def use_real_confluence_data(request):
    return request.config.getoption("--use-real-data")


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _isolate_fetcher():
    """Every test starts without a cached ConfluenceFetcher."""
    reset_confluence_fetcher()
    yield
    reset_confluence_fetcher()


@pytest.fixture
def confluence_config():
    auth_config = AuthConfigFactory.create_basic_auth_config()
    return ConfluenceConfig(
        base_url=auth_config["url"],
        username=auth_config["username"],
        api_token=auth_config["api_token"],
    )


@pytest.fixture
def stub_remote():
    return StubConfluenceRemote()


@pytest.fixture
def patched_confluence(stub_remote):
    """Route every Confluence client created during the test to the stub remote."""
    with patch(
        "confluence_publisher.confluence.client.Confluence", return_value=stub_remote
    ) as mock_confluence_class:
        yield mock_confluence_class


@pytest.fixture
def fetcher(confluence_config, patched_confluence):
    return ConfluenceFetcher(config=confluence_config)


@pytest.fixture
def configured_env(patched_confluence):
    """Complete Confluence environment backed by the stub remote."""
    with MockEnvironment.clean_env(), MockEnvironment.basic_auth_env() as env_vars:
        yield env_vars
