from fastapi import FastAPI

from .db import engine, Base
from .routers.events import router as events_router
from .routers.bookings import router as bookings_router
from eventhub.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging

# Create database tables (and the slug / event_id indexes) if they don’t exist.
Base.metadata.create_all(bind=engine)

# Create the FastAPI app instance
app = FastAPI(title="eventhub")

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - database: the dialect in use (sqlite, postgresql, ...)
    """
    return {
        "ok": True,
        "service": "eventhub",
        "version": 1,
        "database": engine.dialect.name,
    }

# Register API routers:
app.include_router(events_router)
app.include_router(bookings_router)
