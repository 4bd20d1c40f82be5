from fastapi import FastAPI

from vehicle_search.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_search.entrypoints.http.routes.health import router as health_router
from vehicle_search.entrypoints.http.routes.pages import router as pages_router
from vehicle_search.entrypoints.http.routes.search import router as search_router
from vehicle_search.infra.log import configure_logging


def build_app() -> FastAPI:
    app = FastAPI(
        title="Vehicle Search API",
        description="""
        Vehicle search with free-text filtering, price sorting and pagination.

        ## Features
        - JSON search API
        - Server-rendered search page with an embedded boot payload
        - Results fragment for in-page updates

        ## URL State
        Search state lives in the query string (q, page, sort).
        Invalid values are normalized, never rejected.

        ## Error Handling
        Errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(search_router)
    app.include_router(pages_router)

    return app


configure_logging()
app = build_app()
