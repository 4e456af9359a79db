"""
School Management API - Main Application

FastAPI backend with:
- MongoDB for users, schools, classes and students
- JWT authentication (raw token in the Authorization header)
- Photo uploads stored on local disk

Run: uvicorn schoolapp.main:app --reload
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo import MongoClient
from starlette.exceptions import HTTPException

from schoolapp.api.routes import api_router
from schoolapp.core.config import Settings, get_settings
from schoolapp.core.logging_config import configure_logging
from schoolapp.db.mongodb import check_mongo_connection, create_mongo_client, init_mongo_indexes
from schoolapp.schemas.schemas import HealthResponse

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render HTTPException as {"message": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Any unexpected failure (database errors included) becomes a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


def create_app(settings: Optional[Settings] = None, client: Optional[MongoClient] = None) -> FastAPI:
    """
    Build the application.

    Settings and the Mongo client are passed in explicitly and kept on
    app.state; routes reach them only through dependencies.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    client = client or create_mongo_client(settings)

    app = FastAPI(
        title="School Management API",
        description="""
        Backend for a school-management app.

        ## Features
        - **Authentication**: signup (with optional photo) and JWT login
        - **Schools**: create, list per user role
        - **Classes**: create, fetch by id
        - **Students**: create (with optional photo), list, assign to classes
        - **Queries**: students in every class, classmates of a student
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.mongo_client = client
    app.state.db = client[settings.mongodb_db]

    # CORS middleware (allow all for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router)

    @app.on_event("startup")
    async def startup_event():
        """Create the upload dir and MongoDB indexes on startup."""
        os.makedirs(settings.upload_dir, exist_ok=True)
        try:
            init_mongo_indexes(app.state.db)
        except Exception as e:
            logger.warning("MongoDB index initialization failed: %s", e)
        logger.info(
            "Server ready (database=%s, uploads=%s)",
            settings.mongodb_db, os.path.abspath(settings.upload_dir),
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Report whether MongoDB is reachable."""
        return {
            "status": "healthy",
            "mongodb": "connected" if check_mongo_connection(app.state.mongo_client) else "disconnected",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
