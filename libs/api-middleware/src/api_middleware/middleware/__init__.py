from .middleware import Middleware, Callback, Next, create_middleware
from .middleware_handler import Handler, call_handler
from .middleware_stack import CompositeMiddleware, CompositeKind, merge_middleware, stack_middleware, \
    chain_middleware

__all__ = ['Middleware', 'Callback', 'Next', 'create_middleware', 'Handler', 'call_handler', 'CompositeMiddleware',
           'CompositeKind', 'merge_middleware', 'stack_middleware', 'chain_middleware']
