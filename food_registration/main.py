import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from food_registration.api.router import page_router
from food_registration.config import settings
from food_registration.core.database import init_db


def setup_logging() -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)

    # Quieten uvicorn access logs (we'll log requests ourselves)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    setup_logging()
    logger.info("Food Registration starting up")
    if settings.debug or settings.is_sqlite:
        await init_db()
    yield
    logger.info("Food Registration shutting down")


app = FastAPI(
    title="Food Registration",
    description="Register food producers and their products",
    version="0.1.0",
    lifespan=lifespan,
)

# Trust X-Forwarded-Proto from the reverse proxy so redirects keep the scheme
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

# Signed cookie session carrying flash messages across redirects
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret, same_site="lax")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log failed requests and form submissions, skipping health checks."""
    if request.url.path == "/health":
        return await call_next(request)

    response = await call_next(request)

    if response.status_code >= 400 or request.method == "POST":
        logger.info(f"{request.method} {request.url.path} → {response.status_code}")

    return response


# Uploaded images are served straight from the web root
images_path = Path(settings.web_root) / settings.images_dir
images_path.mkdir(parents=True, exist_ok=True)
app.mount(f"/{settings.images_dir}", StaticFiles(directory=images_path), name="images")

app.include_router(page_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
