"""FastAPI application factory.

``create_app()`` wires the routers, the per-request domain context and the
translation of every failure into the JSON envelope. It expects the domain
to be initialized already; ``src/app.py`` does that for the server and the
test fixtures do it for the test suite.
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError

from storefront.config import Settings, get_settings
from storefront.domain import storefront
from storefront.shared.envelope import failure, ok
from storefront.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def _normalize(messages) -> dict[str, list[str]]:
    if isinstance(messages, dict):
        return {
            str(field): [str(m) for m in value] if isinstance(value, list | tuple) else [str(value)]
            for field, value in messages.items()
        }
    if isinstance(messages, list | tuple):
        return {"_entity": [str(m) for m in messages]}
    return {"_entity": [str(messages)]}


def _first_message(messages, default: str) -> str:
    for values in _normalize(messages).values():
        if values:
            return values[0]
    return default


async def _not_found(request: Request, exc: ObjectNotFoundError):
    return failure(_first_message(exc.messages, "Not found"), 404)


async def _invalid(request: Request, exc: ValidationError):
    logger.info("request_rejected", path=request.url.path, error_type=type(exc).__name__, errors=exc.messages)
    return failure(_first_message(exc.messages, "Invalid request"), 400, errors=_normalize(exc.messages))


async def _malformed(request: Request, exc: RequestValidationError):
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"][1:]) or "body"
        errors.setdefault(location, []).append(error["msg"])
    return failure("Invalid request", 400, errors=errors)


async def _stale_write(request: Request, exc: ExpectedVersionError):
    logger.warning("concurrent_write_rejected", path=request.url.path)
    return failure("The record was changed by another request; retry", 409, error=str(exc))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Storefront API",
        description="Catalogue, checkout and order management",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def storefront_context_middleware(request: Request, call_next):
        """Push the domain context and turn anything unhandled into a 500 envelope."""
        add_context(request_id=request.headers.get("x-request-id") or uuid4().hex)
        try:
            with storefront.domain_context():
                return await call_next(request)
        except Exception as exc:
            logger.error("unhandled_error", path=request.url.path, method=request.method, exc_info=exc)
            return failure("Something went wrong", 500, error=str(exc))
        finally:
            clear_context()

    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _invalid)
    app.add_exception_handler(RequestValidationError, _malformed)
    app.add_exception_handler(ExpectedVersionError, _stale_write)

    from storefront.catalogue.api import banner_router, category_router, product_router
    from storefront.ordering.api import order_router
    from storefront.shipping.api import shipping_router

    app.include_router(product_router)
    app.include_router(category_router)
    app.include_router(banner_router)
    app.include_router(order_router)
    app.include_router(shipping_router)

    @app.get("/health")
    async def health():
        return ok(
            message="Storefront API is running",
            data={"domain": storefront.name, "environment": settings.environment},
        )

    return app
