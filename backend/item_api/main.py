import logging
from typing import Optional

from fastapi import FastAPI, Request

from item_api import config
from item_api.errors import error_response, method_not_allowed, register_exception_handlers
from item_api.responses import PrettyJSONResponse
from item_api.routes.items import list_items
from item_api.routes.items import router as items_router
from item_api.schemas import Item
from item_api.storage import ItemStore

APP_VERSION = "0.1.0"

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})

logger = logging.getLogger(__name__)


def create_app(store: Optional[ItemStore] = None, expose_errors: Optional[bool] = None) -> FastAPI:
    app = FastAPI(
        title="Item API",
        version=APP_VERSION,
        default_response_class=PrettyJSONResponse,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store if store is not None else ItemStore()
    app.state.expose_errors = config.EXPOSE_ERRORS if expose_errors is None else expose_errors

    register_exception_handlers(app)

    @app.middleware("http")
    async def screen_and_log(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        if request.method not in SUPPORTED_METHODS:
            err = method_not_allowed()
            return error_response(err.status_code, err.message)
        return await call_next(request)

    app.add_api_route("/", list_items, methods=["GET"], response_model=list[Item])
    app.include_router(items_router)
    return app


app = create_app()
