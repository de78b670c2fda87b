import re
from typing import Union

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from item_api.errors import invalid_id, invalid_item, item_not_found, not_found
from item_api.schemas import Item, ItemPayload, MessageResponse
from item_api.storage import ItemStore

router = APIRouter(prefix="/api/items", tags=["items"])

_ID_RE = re.compile(r"[+-]?[0-9]+")

# Ids are 32-bit signed integers on the wire.
_ID_MIN = -(2**31)
_ID_MAX = 2**31 - 1


def get_store(request: Request) -> ItemStore:
    return request.app.state.store


def parse_item_id(segment: str) -> int:
    """Turn the path remainder after ``api/items/`` into an item id.

    An empty remainder means the collection path itself, which has no
    route for PUT or DELETE.
    """

    segment = segment.strip("/")
    if not segment:
        raise not_found()
    if not _ID_RE.fullmatch(segment):
        raise invalid_id()
    value = int(segment)
    if not _ID_MIN <= value <= _ID_MAX:
        raise invalid_id()
    return value


def parse_item_payload(raw_body: bytes) -> ItemPayload:
    if not raw_body.strip():
        raise invalid_item()
    try:
        payload = ItemPayload.model_validate_json(raw_body)
    except ValidationError as err:
        raise invalid_item() from err
    if not payload.name:
        raise invalid_item()
    return payload


@router.get("", response_model=list[Item])
@router.get("/", response_model=list[Item], include_in_schema=False)
async def list_items(store: ItemStore = Depends(get_store)):
    return store.list()


@router.post("", response_model=Item, status_code=201)
@router.post("/", response_model=Item, status_code=201, include_in_schema=False)
async def create_item(request: Request, store: ItemStore = Depends(get_store)):
    payload = parse_item_payload(await request.body())
    return store.create(payload.model_dump())


@router.post("/{rest:path}", response_model=Item, status_code=201, include_in_schema=False)
async def create_item_slashed(rest: str, request: Request, store: ItemStore = Depends(get_store)):
    if rest.strip("/"):
        raise not_found()
    return await create_item(request, store)


@router.get("/{item_id:path}", response_model=Union[Item, list[Item]])
async def get_item(item_id: str, store: ItemStore = Depends(get_store)):
    # Repeated trailing slashes still name the collection.
    if not item_id.strip("/"):
        return await list_items(store)
    item = store.get(parse_item_id(item_id))
    if item is None:
        raise item_not_found()
    return item


@router.put("/{item_id:path}", response_model=Item)
async def replace_item(item_id: str, request: Request, store: ItemStore = Depends(get_store)):
    key = parse_item_id(item_id)
    if store.get(key) is None:
        raise item_not_found()

    payload = parse_item_payload(await request.body())
    item = store.replace(key, payload.model_dump())
    # Deleted between the lookup and the write.
    if item is None:
        raise item_not_found()
    return item


@router.delete("/{item_id:path}", response_model=MessageResponse)
async def delete_item(item_id: str, store: ItemStore = Depends(get_store)):
    item = store.delete(parse_item_id(item_id))
    if item is None:
        raise item_not_found()
    return MessageResponse(message="Item deleted")
