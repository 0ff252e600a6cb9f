from enum import StrEnum
from typing import Any, Protocol, Self


class HttpMethod(StrEnum):
    # https://developer.mozilla.org/en-US/docs/Web/HTTP/Methods
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    PATCH = 'PATCH'
    DELETE = 'DELETE'
    HEAD = 'HEAD'
    OPTIONS = 'OPTIONS'
    TRACE = 'TRACE'
    CONNECT = 'CONNECT'


HTTP_METHODS: tuple[HttpMethod, ...] = tuple(HttpMethod)


class Request(Protocol):
    """The request object handed in by the host. Middleware may assign extra attributes to it."""

    method: str | None


class Response(Protocol):
    def status(self, code: int) -> Self:
        ...

    def json(self, body: Any) -> Any:
        ...

    def send(self, body: Any) -> Any:
        ...
