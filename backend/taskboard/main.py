import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_setup import setup_logging
from .db.session import init_db
from .api.v1 import tasks

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    logger.info("%s ready, routes under %s", settings.APP_NAME, settings.API_PREFIX)
    yield

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="A RESTful API for managing tasks with CRUD operations",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)
app.include_router(tasks.router, prefix=settings.API_PREFIX)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response

def run() -> None:
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
