# product_api/main.py
import hmac
import logging
from typing import Optional, Dict, List

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .core import ProductIn, ProductUpdate
from .database import ProductStore
from .errors import ProductAPIError, Unauthorized, ValidationError, InternalError
from .logging_config import setup_logging
from .models import Product, ProductPage
from . import service

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("product_api.requests")

WELCOME_TEXT = "Welcome to the Product API! Go to /api/products to see all products."


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def _error_response(exc: ProductAPIError, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)


# ---------------------------
# Request filters
# ---------------------------
def _install_filters(app: FastAPI, settings: Settings) -> None:
    # Starlette runs the middleware added last first: logging -> auth -> CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    expected_key = settings.api_key.encode("utf-8")

    @app.middleware("http")
    async def require_api_key(request: Request, call_next):
        api_key = request.headers.get("x-api-key")
        if not api_key or not hmac.compare_digest(api_key.encode("utf-8"), expected_key):
            logger.warning("rejected %s %s: invalid api key", request.method, request.url.path)
            return _error_response(Unauthorized())
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        request_logger.info("%s %s", request.method, target)
        return await call_next(request)


# ---------------------------
# Error translation
# ---------------------------
def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ProductAPIError)
    async def handle_api_error(request: Request, exc: ProductAPIError):
        logger.warning("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("%s %s -> invalid body: %s", request.method, request.url.path, exc.errors())
        return _error_response(ValidationError())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        err = ProductAPIError(str(exc.detail), status_code=exc.status_code)
        return _error_response(err, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return _error_response(InternalError())


# ---------------------------
# Routes
# ---------------------------
def _install_routes(app: FastAPI) -> None:
    @app.get("/", response_class=PlainTextResponse)
    async def welcome():
        return WELCOME_TEXT

    @app.get("/api/products", response_model=List[Product])
    async def list_products(store: ProductStore = Depends(get_store)):
        return await service.list_products_logic(store)

    # literal segments must be registered before /api/products/{product_id}
    @app.get("/api/products/filter", response_model=ProductPage)
    async def filter_products(
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        store: ProductStore = Depends(get_store),
    ):
        return await service.filter_products_logic(store, category, search, page, limit)

    @app.get("/api/products/stats")
    async def product_stats(store: ProductStore = Depends(get_store)):
        return await service.product_stats_logic(store)

    @app.get("/api/products/{product_id}", response_model=Product)
    async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
        return await service.get_product_logic(store, product_id)

    @app.post("/api/products", response_model=Product, status_code=201)
    async def create_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
        return await service.create_product_logic(store, payload)

    @app.put("/api/products/{product_id}", response_model=Product)
    async def update_product(
        product_id: str,
        payload: Optional[ProductUpdate] = None,
        store: ProductStore = Depends(get_store),
    ):
        # a missing body behaves like {}: every field is nulled
        return await service.update_product_logic(store, product_id, payload or ProductUpdate())

    @app.delete("/api/products/{product_id}", response_model=Product)
    async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
        return await service.delete_product_logic(store, product_id)


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    """Build the application around its own settings and product store."""
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name)
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()

    _install_filters(app, settings)
    _install_error_handlers(app)
    _install_routes(app)
    return app


app = create_app()
