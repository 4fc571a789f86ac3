import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from core.brewery_client import BreweryApiClient
from core.config import Settings, settings
from core.log_config import configure_logging
from core.notifications import LowStockNotifier
from core.product_store import ProductStore
from core.validation import collect_violations
from db.database import Database
from routers.inventory import router as inventory_router

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None, http_transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        http = httpx.AsyncClient(timeout=app_settings.downstream_timeout, transport=http_transport)
        database = None
        if app_settings.inventory_backend == "database":
            database = Database(app_settings.database_url, echo=app_settings.database_echo)
            await database.create_tables()
            app.state.inventory = ProductStore(database)
        else:
            app.state.inventory = BreweryApiClient(base_url=app_settings.brewery_api_url, http=http)
        app.state.notifier = LowStockNotifier(base_url=app_settings.notification_api_url, http=http)
        logger.info(
            "Inventory service starting (env=%s, backend=%s)",
            app_settings.environment, app_settings.inventory_backend,
        )
        try:
            yield
        finally:
            await http.aclose()
            if database is not None:
                await database.dispose()

    app = FastAPI(
        title="Inventory Service",
        description="Product inventory and stock levels, backed by the brewery API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        violations = collect_violations(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, [v.field for v in violations])
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": [v.model_dump() for v in violations]},
        )

    @app.get("/healthcheck", response_class=PlainTextResponse)
    async def healthcheck():
        return "The Inventory Service is ALIVE!"

    app.include_router(inventory_router, prefix="/inventory", tags=["inventory"])

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port, reload=settings.environment == "development")
