import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from storeadmin.api.routes import auth, pages, products, stores, user_store
from storeadmin.api.session_gate import SessionGateMiddleware
from storeadmin.core.config import settings
from storeadmin.db.bootstrap import ensure_tables_exist
from storeadmin.db.database import build_engine, build_session_factory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    owns_engine = app.state.engine is None
    if owns_engine:
        app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # schema must exist before the first request is served
    await run_in_threadpool(ensure_tables_exist, app.state.engine)
    logger.info("Store admin API started")

    yield

    if owns_engine:
        app.state.engine.dispose()


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the application. Without an engine, one is built from settings at startup."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(title="Store Admin API", version="0.1.0", lifespan=lifespan)
    app.state.engine = engine

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_middleware(SessionGateMiddleware)

    app.include_router(stores.router, prefix="/api")
    app.include_router(user_store.router, prefix="/api")
    app.include_router(products.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(pages.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storeadmin.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
