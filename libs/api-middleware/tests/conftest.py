import pytest

from api_middleware import create_middleware
from tests.helpers import MockRequest, MockResponse, SpyCallback


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def create_mocks():
    """Factory fixture returning a fresh request/response pair."""

    def _create(method: str | None = 'GET', **attributes):
        return MockRequest(method, **attributes), MockResponse()

    return _create


@pytest.fixture
def spy(call_log):
    """Factory fixture creating a middleware that logs '<tag>_enter' and '<tag>_exit' around next()."""

    def _create(tag: str):
        return create_middleware(SpyCallback(tag, call_log))

    return _create


@pytest.fixture
def ok_handler(call_log):
    def handler(req, res):
        call_log.append('handler')
        res.status(200).send('OK')

    return handler
