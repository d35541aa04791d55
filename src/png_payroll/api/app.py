"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from png_payroll.api.routes import health_router, shifts_router, tax_router
from png_payroll.calculators import InvalidInputError, NoBracketsError, PayrollError
from png_payroll.database import dispose_db, init_db
from png_payroll.services import BracketNotFoundError, ShiftNotFoundError

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[PayrollError], int] = {
    InvalidInputError: 422,
    NoBracketsError: status.HTTP_404_NOT_FOUND,
    BracketNotFoundError: status.HTTP_404_NOT_FOUND,
    ShiftNotFoundError: status.HTTP_404_NOT_FOUND,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    init_db()
    yield
    await dispose_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="PNG Payroll API",
        description="PNG salary and wages tax calculation and tax tables",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(PayrollError)
    async def payroll_exception_handler(
        request: Request, exc: PayrollError
    ) -> JSONResponse:
        """Map calculation and lookup errors to client errors."""
        status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "code": exc.code},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(tax_router, prefix="/api/v1")
    app.include_router(shifts_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
