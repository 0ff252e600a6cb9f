from typing import Literal, TypeAlias

from .middleware import Middleware
from .middleware_handler import Handler

CompositeKind: TypeAlias = Literal['stack', 'chain']


def merge_middleware(a: Middleware, b: Middleware) -> Middleware:
    """
    Merge two middleware into one. ``b`` is applied to the handler first and ``a`` wraps the result,
    so ``merge_middleware(a, b)(handler)`` is ``a(b(handler))``.

    :param a: the outer middleware
    :param b: the inner middleware
    """

    def merged_middleware(handler: Handler) -> Handler:
        return a(b(handler))

    return merged_middleware


class CompositeMiddleware:
    __slots__ = ('_middleware', '_kind')

    def __init__(self, middleware: Middleware, kind: CompositeKind):
        self._middleware = middleware
        self._kind = kind

    @property
    def kind(self) -> CompositeKind:
        return self._kind

    def __call__(self, handler: Handler) -> Handler:
        return self._middleware(handler)

    def add(self, middleware: Middleware) -> 'CompositeMiddleware':
        if self._kind == 'stack':
            merged = merge_middleware(self._middleware, middleware)
        else:
            merged = merge_middleware(middleware, self._middleware)
        return CompositeMiddleware(merged, self._kind)

    def __repr__(self) -> str:
        return f'CompositeMiddleware(kind={self._kind!r}, middleware={self._middleware!r})'


def stack_middleware(middleware: Middleware) -> CompositeMiddleware:
    """Start a composite where every ``add`` nests the new middleware innermost, so it runs last."""
    return CompositeMiddleware(middleware, 'stack')


def chain_middleware(middleware: Middleware) -> CompositeMiddleware:
    """Start a composite where every ``add`` wraps the new middleware outermost, so it runs first."""
    return CompositeMiddleware(middleware, 'chain')
