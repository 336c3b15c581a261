"""
MotoParts Storefront
FastAPI application entry point

- Entity store chosen by STORAGE_BACKEND, seeded on first start
- Rate limiting with SlowAPI on every /api route (stricter on checkout)
- Error sanitization middleware and JSON error bodies
- Security headers (CSP, X-Frame-Options, etc.)
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from motoparts.api.routes import cart, categories, orders, products, testimonials
from motoparts.core.config import settings
from motoparts.core.error_handler import (
    ErrorSanitizationMiddleware,
    request_validation_error_handler,
    storefront_error_handler,
)
from motoparts.core.exceptions import StorefrontError
from motoparts.core.logging_config import configure_logging
from motoparts.core.rate_limit import limiter, rate_limit_exceeded_handler
from motoparts.core.security_headers import SecurityHeadersMiddleware
from motoparts.storage import build_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create (and seed) the entity store on startup, release it on shutdown."""
    configure_logging()
    app.state.storage = await build_storage()
    logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")

    yield

    await app.state.storage.close()
    logger.info("Entity store closed")


app = FastAPI(
    lifespan=lifespan,
    title=f"{settings.APP_NAME} API",
    description="""
## MotoParts Storefront API

Catalog, guest cart and checkout for a motorcycle parts shop.

### Features
- **Catalog**: Categories, products (filter, search, sort) and testimonials
- **Cart**: Guest carts keyed by a client-chosen cart id, with totals
- **Orders**: Checkout from the client's line items

### Rate Limits
Per client address, configurable through RATE_LIMIT_DEFAULT and
RATE_LIMIT_CHECKOUT.
- Checkout: 10 requests/minute by default
- Every other /api route: 100 requests/minute by default
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Health", "description": "Health check endpoints"},
        {"name": "Categories", "description": "Product categories"},
        {"name": "Products", "description": "Product catalog"},
        {"name": "Cart", "description": "Guest shopping cart operations"},
        {"name": "Orders", "description": "Order placement and lookup"},
        {"name": "Testimonials", "description": "Customer testimonials"},
    ],
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Error bodies
app.add_exception_handler(StorefrontError, storefront_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

# Error sanitization (catches unhandled exceptions)
app.add_middleware(ErrorSanitizationMiddleware)

# Security headers (CSP, X-Frame-Options, etc.)
app.add_middleware(SecurityHeadersMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(testimonials.router, prefix="/api/testimonials", tags=["Testimonials"])


@app.get("/", tags=["Health"])
async def root():
    return {
        "message": "MotoParts Storefront API",
        "version": "1.0.0",
        "status": "operational",
    }


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """
    Health check with a round trip to the entity store.
    Returns 503 if the store cannot be read.
    """
    storage = request.app.state.storage
    health_status = {
        "status": "healthy",
        "storage": storage.backend_name,
        "catalog_loaded": None,
    }

    try:
        health_status["catalog_loaded"] = not await storage.is_empty()
    except Exception as e:
        logger.error(f"Health check failed: {type(e).__name__}: {e}")
        health_status["status"] = "unhealthy"
        health_status["error"] = type(e).__name__
        return JSONResponse(status_code=503, content=health_status)

    return health_status
