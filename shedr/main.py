# shedr/main.py

# FastAPI application entrypoint for the load-shedding schedule service.
# Includes health and schedule routers and configures logging on startup.
# Root endpoint shows available API routes for quick reference.

from fastapi import FastAPI
from shedr.api.health import router as health_router
from shedr.api.schedule import router as schedule_router
from shedr.app_logging import configure_logging

app = FastAPI(title="Shedr Schedule Engine", version="0.1.0")
app.include_router(health_router, tags=["health"])
app.include_router(schedule_router, tags=["schedule"])

@app.on_event("startup")
async def on_startup():
    configure_logging()

@app.get("/")
async def root():
    return {"status": "ok", "see": ["/healthz", "/status", "/upcoming", "/reminders",
                                    "/week", "/filter", "/suburbs/search"]}
