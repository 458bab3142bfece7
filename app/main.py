from contextlib import asynccontextmanager
from fastapi import FastAPI

from .routers.convert import router as convert_router
from .routers.sessions import router as sessions_router
from app.session import SessionRegistry
from app.settings import SERVICE_NAME, SERVICE_VERSION
from app.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    Sessions are in-memory only, so they start empty and are dropped
    when the service stops.
    """
    app.state.sessions = SessionRegistry()
    yield
    app.state.sessions = None

# Create the FastAPI app instance
app = FastAPI(title="XML to JSON", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health check for monitoring.
    Returns:
      - ok: static True if the app is alive
      - sessions: number of live converter sessions
    """
    sessions = getattr(app.state, "sessions", None)
    return {
        "ok": True,
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "sessions": len(sessions) if sessions is not None else 0,
    }

# Register API routers:
app.include_router(convert_router)
app.include_router(sessions_router)
