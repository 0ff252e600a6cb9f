from .http import HttpMethod, HTTP_METHODS, Request, Response
from .middleware import Middleware, Callback, Next, Handler, CompositeMiddleware, create_middleware, \
    merge_middleware, stack_middleware, chain_middleware, call_handler
from .method_handler import MethodHandler, HandlerConfig, MiddlewareConfig, create_handler

__all__ = ['HttpMethod', 'HTTP_METHODS', 'Request', 'Response', 'Middleware', 'Callback', 'Next', 'Handler',
           'CompositeMiddleware', 'create_middleware', 'merge_middleware', 'stack_middleware', 'chain_middleware',
           'call_handler', 'MethodHandler', 'HandlerConfig', 'MiddlewareConfig', 'create_handler']
