"""
Storefront Application

Backend for an e-commerce storefront: product catalog, user accounts and a
per-user shopping cart with wallet checkout.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from .core.config import Settings, get_settings
from .core.errors import ApiError
from .database import CartDatabase, DocumentStore, ProductDatabase, UserDatabase
from .routes import products_router, cart_router, users_router
from .services.cart_service import CartService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {"email": "demo-user@storefront.dev", "name": "Demo User"},
    {
        "email": "demo-buyer@storefront.dev",
        "name": "Demo Buyer",
        "address": "221B Baker Street, London NW1 6XE",
    },
]


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def seed_demo_users(users: UserDatabase) -> None:
    """Create the demo accounts if they are missing"""
    for data in DEMO_USERS:
        if not users.get_by_email(data["email"]):
            user = users.create(**data)
            logger.info(f"Seeded demo user {user.email} ({user.id})")


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError as {code, message} with its status"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The document store is created here, once per app, and handed to the
    databases and the cart service; routes reach them through ``app.state``.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    store = DocumentStore()
    products = ProductDatabase()
    users = UserDatabase(
        store,
        default_wallet_money=settings.default_wallet_money,
        default_address=settings.default_address,
    )
    carts = CartDatabase(store, default_payment_option=settings.default_payment_option)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up...")
        if settings.seed_demo_data:
            seed_demo_users(users)
        yield
        logger.info(f"{settings.app_name} shutting down...")
        store.reset()

    app = FastAPI(
        title=settings.app_name,
        description="Storefront catalog, accounts and cart API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.products = products
    app.state.users = users
    app.state.carts = carts
    app.state.cart_service = CartService(store=store, carts=carts, products=products, users=users)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, restrict this
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, api_error_handler)

    # Include API routers
    app.include_router(products_router, prefix=settings.api_prefix)
    app.include_router(cart_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "storefront"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
