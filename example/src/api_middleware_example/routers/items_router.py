import logging

from fastapi import APIRouter

from api_middleware import create_handler
from api_middleware.fastapi import endpoint

from ..middleware import base, protected, protected_with_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/items', tags=['items'])

items: dict[str, dict] = {}


async def list_items(req, res):
    res.status(200).json(list(items.values()))


async def create_item(req, res):
    if 'name' not in req.body_json:
        res.status(422).json({'message': 'Missing item name'})
        return

    item = {'name': req.body_json['name'], 'created_by': req.account}
    items[item['name']] = item
    logger.debug('Created item %s', item['name'])
    res.status(201).json(item)


async def read_item(req, res):
    res.status(200).json(items[req.path_params['name']])


async def update_item(req, res):
    name = req.path_params['name']
    items[name] = {**items[name], **req.body_json, 'name': name}
    res.status(200).json(items[name])


async def delete_item(req, res):
    del items[req.path_params['name']]
    res.status(204)


collection_handler = create_handler({
    'middleware': {
        'default': base,
        'post': protected_with_body,
    }
}).get(list_items).post(create_item)

item_handler = create_handler({
    'middleware': {
        'default': base,
        'put': protected_with_body,
        'delete': protected,
    }
}).get(read_item).put(update_item).delete(delete_item)

router.add_api_route('/', endpoint(collection_handler), methods=['GET', 'POST', 'PATCH'])
router.add_api_route('/{name}', endpoint(item_handler), methods=['GET', 'PUT', 'DELETE', 'PATCH'])
