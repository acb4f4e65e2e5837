from fastapi import FastAPI

from handset_pricing.entrypoints.http.exception_handlers import register_exception_handlers
from handset_pricing.entrypoints.http.routes.devices import router as devices_router
from handset_pricing.entrypoints.http.routes.health import router as health_router
from handset_pricing.entrypoints.http.routes.plans import router as plans_router
from handset_pricing.entrypoints.http.routes.pricing import router as pricing_router
from handset_pricing.infra.config import log_level
from handset_pricing.infra.logging import setup_logging


def build_app() -> FastAPI:
    setup_logging(log_level())

    app = FastAPI(
        title="Handset Pricing API",
        description="""
        Monthly price calculation for handset + plan subscriptions.

        ## Features
        - Price a device on a plan for a join type, contract type,
          installment term and bundle option
        - Compare subsidy discount against selective contract
        - Browse exposed devices, their subsidies and plans

        ## Error Handling
        All errors return structured JSON responses with error codes.
        An unusable catalog snapshot answers 503 DATA_INTEGRITY_ERROR.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(pricing_router, prefix="/v1")
    app.include_router(devices_router, prefix="/v1")
    app.include_router(plans_router, prefix="/v1")

    return app


app = build_app()
