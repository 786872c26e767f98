"""
Catalog Resolver Gateway - FastAPI Main Entry

Lets a voice/chat agent look up Shopify variants and product descriptions
without holding Shopify credentials. Every route requires X-API-Key.

✅ LOCAL:
    cd backend
    cp .env.example .env   # fill in SHOPIFY_SHOP / SHOPIFY_ADMIN_TOKEN / MW_API_KEY
    python -m uvicorn catalog_gateway.main:app --reload --port 3000
    # or: catalog-gateway

✅ TEST:
    curl -i -H "X-API-Key: $MW_API_KEY" http://127.0.0.1:3000/health
    curl -i -H "X-API-Key: $MW_API_KEY" -H "Content-Type: application/json" \
        -d '{"text": "Blue Widget (123456)"}' http://127.0.0.1:3000/resolve_reference
    curl -i -H "X-API-Key: $MW_API_KEY" \
        http://127.0.0.1:3000/variant/gid://shopify/ProductVariant/123/description_text

✅ PRODUCTION:
    Start Command:
        python -m uvicorn catalog_gateway.main:app --host 0.0.0.0 --port $PORT
"""

import logging
import secrets
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_gateway.core.config import Settings
from catalog_gateway.core.shopify import ShopifyAdminClient

# ✅ Routers
from catalog_gateway.api.routes_meta import router as meta_router
from catalog_gateway.api.routes_resolve import router as resolve_router
from catalog_gateway.api.routes_variants import router as variants_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="Catalog Resolver Gateway",
        version="0.1.0",
        description="Resolves spoken product references to Shopify variants (Admin GraphQL)",
    )
    app.state.settings = settings
    app.state.shopify = ShopifyAdminClient(settings)

    # ✅ API key gate (runs before routing, so it covers every path)
    @app.middleware("http")
    async def require_api_key(request: Request, call_next):
        expected = app.state.settings.MW_API_KEY
        if not expected:
            logger.error("MW_API_KEY not set; rejecting %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": "MW_API_KEY not set"})

        supplied = request.headers.get("X-API-Key")
        if supplied is None or not secrets.compare_digest(supplied.encode(), expected.encode()):
            logger.warning("Unauthorized %s %s", request.method, request.url.path)
            return JSONResponse(status_code=401, content={"error": "Unauthorized"})

        return await call_next(request)

    # ✅ One error shape for everything: {"error": ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    # Bad request bodies are handler failures like any other: 500 + {"error": message}
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        message = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
            for err in exc.errors()
        ) or "Invalid request"
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=500, content={"error": message})

    # ✅ Mount routers
    app.include_router(meta_router)
    app.include_router(resolve_router)
    app.include_router(variants_router)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = app.state.settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Running on %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
