from typing import Any, Awaitable, Callable, TypeAlias

from .middleware_handler import Handler, call_handler, resolve
from ..http import Request, Response

Middleware: TypeAlias = Callable[[Handler], Handler]

Next: TypeAlias = Callable[[], Awaitable[Any]]

Callback: TypeAlias = Callable[[Request, Response, Next], Any]


def create_middleware(callback: Callback, *, once: bool = False) -> Middleware:
    """
    Lift a ``callback(req, res, next)`` into a middleware, i.e. a function that takes a handler and returns
    a new handler with the same ``(req, res)`` signature.

    Awaiting ``next()`` runs the wrapped handler with the original request and response. The callback may skip
    it to short-circuit the request, or call it again, which re-runs the wrapped handler. Plain (non-async)
    callbacks continue the chain by returning ``next()``.

    :param callback: the function exposing the request, the response and the continuation.
    :param once: raise ``RuntimeError`` when ``next()`` is called more than once for the same request.
    """

    def middleware(handler: Handler) -> Handler:
        async def middleware_handler(req: Request, res: Response) -> Any:
            called = False

            async def next_() -> Any:
                nonlocal called
                if once and called:
                    raise RuntimeError(f'next() was called more than once by {callback!r}.')
                called = True
                return await call_handler(handler, req, res)

            return await resolve(callback(req, res, next_))

        return middleware_handler

    return middleware
