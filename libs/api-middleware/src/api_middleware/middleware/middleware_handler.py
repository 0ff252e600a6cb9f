import inspect
from typing import Any, Callable, TypeAlias

from ..http import Request, Response

Handler: TypeAlias = Callable[[Request, Response], Any]


async def resolve(outcome: Any) -> Any:
    if inspect.isawaitable(outcome):
        return await outcome
    return outcome


async def call_handler(handler: Handler, req: Request, res: Response) -> Any:
    return await resolve(handler(req, res))
