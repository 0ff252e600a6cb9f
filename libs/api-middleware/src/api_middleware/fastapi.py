from typing import Any, Callable, Awaitable, Self

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from .middleware import Handler, call_handler

_UNSET = object()


class ApiResponse:
    """Collects what a handler writes so it can be turned into a FastAPI response afterwards."""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.headers: dict[str, str] = {}
        self.body: Any = _UNSET
        self.media_type: str | None = None

    @property
    def written(self) -> bool:
        return self.body is not _UNSET

    def status(self, code: int) -> Self:
        self.status_code = code
        return self

    def set_header(self, name: str, value: str) -> Self:
        self.headers[name] = value
        return self

    def json(self, body: Any) -> Self:
        self.body = body
        self.media_type = 'application/json'
        return self

    def send(self, body: Any) -> Self:
        if isinstance(body, (str, bytes)):
            self.body = body
            self.media_type = 'text/plain'
            return self
        return self.json(body)

    def to_response(self) -> Response:
        if not self.written:
            return Response(status_code=self.status_code, headers=self.headers)

        if self.media_type == 'application/json':
            return JSONResponse(self.body, status_code=self.status_code, headers=self.headers)

        return Response(self.body, status_code=self.status_code, headers=self.headers, media_type=self.media_type)


def endpoint(handler: Handler) -> Callable[[Request], Awaitable[Response]]:
    """
    Mount a ``(req, res)`` handler as a FastAPI endpoint:

        api.add_api_route('/items', endpoint(items_handler), methods=['GET', 'POST'])
    """

    async def api_endpoint(request: Request) -> Response:
        response = ApiResponse()
        await call_handler(handler, request, response)
        return response.to_response()

    return api_endpoint
