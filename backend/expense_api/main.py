# expense_api/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from expense_api import __version__
from expense_api.api.v1 import auth, categories, dashboard, health, transactions
from expense_api.core.config import settings
from expense_api.core.errors import AppError
from expense_api.core.logging import RequestLogMiddleware, configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Expense Tracker API", version=__version__)

    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Request validation failed on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})

    app.include_router(health.router, prefix="/api")
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(categories.router, prefix="/api/categories", tags=["categories"])
    app.include_router(transactions.router, prefix="/api/transactions", tags=["transactions"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])

    @app.get("/")
    def root():
        return {"message": "Expense Tracker API - visit /api/health"}

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    # drop ctx/input, which may hold non-JSON values (e.g. the raw exception)
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in exc.errors()]


app = create_app()
