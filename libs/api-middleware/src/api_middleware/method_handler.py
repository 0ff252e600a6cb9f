import logging
from typing import Any, TypedDict

from .http import HttpMethod, Request, Response
from .middleware import Handler, Middleware, call_handler

logger = logging.getLogger(__name__)

MISSING_METHOD_STATUS = 500
MISSING_METHOD_MESSAGE = 'Missing request method!'

UNSUPPORTED_METHOD_STATUS = 405
UNSUPPORTED_METHOD_MESSAGE = 'Unsupported method!'


class MiddlewareConfig(TypedDict, total=False):
    get: Middleware
    post: Middleware
    put: Middleware
    patch: Middleware
    delete: Middleware
    default: Middleware


class HandlerConfig(TypedDict, total=False):
    middleware: MiddlewareConfig


class MethodHandler:
    """
    Dispatches a request to the handler registered for its HTTP method.

    Handlers are registered once at setup time with ``get``, ``post``, ``put``, ``patch`` and ``delete``. Each one
    is wrapped with the middleware configured for its method, or the ``default`` middleware when the method has
    none. Registering a method again replaces the previous handler.
    """

    def __init__(self, config: HandlerConfig | None = None):
        self._middleware: MiddlewareConfig = (config or {}).get('middleware') or {}
        self._handlers: dict[HttpMethod, Handler] = {}

    @property
    def registered_methods(self) -> list[HttpMethod]:
        return list(self._handlers)

    def get(self, handler: Handler) -> 'MethodHandler':
        return self._register(HttpMethod.GET, handler)

    def post(self, handler: Handler) -> 'MethodHandler':
        return self._register(HttpMethod.POST, handler)

    def put(self, handler: Handler) -> 'MethodHandler':
        return self._register(HttpMethod.PUT, handler)

    def patch(self, handler: Handler) -> 'MethodHandler':
        return self._register(HttpMethod.PATCH, handler)

    def delete(self, handler: Handler) -> 'MethodHandler':
        return self._register(HttpMethod.DELETE, handler)

    async def __call__(self, req: Request, res: Response) -> Any:
        method = getattr(req, 'method', None)

        if not method:
            logger.warning('Request has no method')
            res.status(MISSING_METHOD_STATUS).json({'message': MISSING_METHOD_MESSAGE})
            return None

        method = method.upper()
        handler = self._handlers.get(method)

        if handler is None:
            logger.warning('No handler registered for method %s', method)
            res.status(UNSUPPORTED_METHOD_STATUS).json({'message': UNSUPPORTED_METHOD_MESSAGE})
            return None

        logger.debug('Dispatching %s request', method)
        return await call_handler(handler, req, res)

    def _register(self, method: HttpMethod, handler: Handler) -> 'MethodHandler':
        middleware = self._resolve_middleware(method.lower())
        self._handlers[method] = middleware(handler) if middleware else handler
        logger.debug('Registered %s handler %r', method, handler)
        return self

    def _resolve_middleware(self, key: str) -> Middleware | None:
        return self._middleware.get(key) or self._middleware.get('default')


def create_handler(config: HandlerConfig | None = None) -> MethodHandler:
    return MethodHandler(config)
