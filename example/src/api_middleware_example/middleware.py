import logging
import time

from api_middleware import create_middleware, stack_middleware

logger = logging.getLogger(__name__)

API_TOKEN = 'secret'


async def log_request(req, res, next):
    start = time.perf_counter()
    try:
        return await next()
    finally:
        logger.info('%s %s handled in %.2fms', req.method, req.url.path, (time.perf_counter() - start) * 1000)


async def error_boundary(req, res, next):
    try:
        return await next()
    except KeyError as e:
        res.status(404).json({'message': f'Item {e.args[0]} not found'})


async def require_token(req, res, next):
    if req.headers.get('Authorization') != f'Bearer {API_TOKEN}':
        res.status(401).json({'message': 'Unauthorized'})
        return
    req.account = 'admin'
    await next()


async def parse_body(req, res, next):
    try:
        req.body_json = await req.json()
    except ValueError:
        res.status(400).json({'message': 'Request body must be JSON'})
        return

    if not isinstance(req.body_json, dict):
        res.status(422).json({'message': 'Request body must be a JSON object'})
        return

    await next()


base = stack_middleware(create_middleware(log_request)).add(create_middleware(error_boundary))

protected = base.add(create_middleware(require_token))

protected_with_body = protected.add(create_middleware(parse_body))
