import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError

from birja.core.exceptions import CustomException
from birja.core.settings import settings
from birja.core.store import lifespan
from birja.routers.api.application import application_router
from birja.routers.api.auth import auth_router
from birja.routers.api.health import health_router
from birja.routers.api.images import images_router
from birja.routers.api.vacancy import vacancy_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        return JSONResponse(
            status_code=exc.code,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(DBAPIError)
    async def database_error_handler(request: Request, exc: DBAPIError):
        logger.error("Database error on %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(
            status_code=500,
            content={"error": "Database Error"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Birja Backend",
        version="1.0.0",
        lifespan=lifespan,
        docs_url='/api/docs',
        redoc_url='/api/redoc',
        openapi_url="/api/openapi.json"
    )

    app.openapi = lambda: custom_openapi(app)

    app.include_router(auth_router)
    app.include_router(vacancy_router)
    app.include_router(application_router)
    app.include_router(images_router)
    app.include_router(health_router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    return app


app = create_app()


if __name__ == '__main__':
    import uvicorn

    uvicorn.run(
        'main:app',
        host='0.0.0.0',
        port=settings.PORT,
        forwarded_allow_ips='*',
        proxy_headers=True
    )
