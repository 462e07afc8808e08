from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.biztime.core.config import settings
from apps.biztime.core.db import run_migrations
from apps.biztime.core.error_handlers import register_error_handlers

# Routers
from apps.biztime.routes import companies, invoices, system

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
)

# ==========================
# CORS
# ==========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==========================
# Error handlers
# ==========================
register_error_handlers(app)

# ==========================
# Startup Event
# ==========================
@app.on_event("startup")
def startup_event():
    run_migrations()
    logger.info("Database initialized")
    logger.info("%s is running", settings.APP_NAME)

# ==========================
# Routers
# ==========================
app.include_router(system.router, prefix="/system", tags=["system"])
app.include_router(companies.router, prefix="/companies", tags=["companies"])
app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])

# ==========================
# Root Endpoint
# ==========================
@app.get("/")
def root():
    return {
        "service": "biztime-api",
        "status": "running",
        "endpoints": {
            "system": "/system/health",
            "companies": "/companies/",
            "invoices": "/invoices/",
        },
    }
