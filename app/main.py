from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
import logging

# Import middleware
from app.common.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware

# Import database components
from app.database.database import engine, Base, SessionLocal

# Import routers
from app.modules.locations.router import router as locations_router
from app.modules.staff.router import router as staff_router
from app.modules.catalog.router import router as catalog_router
from app.modules.sales.router import router as sales_router
from app.modules.expenses.router import router as expenses_router, incomes_router
from app.modules.pos.routers import daily_closes_router, settings_router
from app.modules.reports.routers import (
    financial_router as financial_reports_router,
    distribution_router as distribution_reports_router,
    barbers_router as barbers_reports_router
)

# Import models for table creation
import app.modules.locations.models
import app.modules.staff.models
import app.modules.catalog.models
import app.modules.sales.models
import app.modules.expenses.models
import app.modules.pos.models

from app.modules.locations.seed_data import populate_locations
from app.core.config import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.ENVIRONMENT == "production" else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(
    title="Nórdico API",
    description="Punto de venta y back-office para la cadena de barberías: tickets, gastos, cierres de caja, "
                "distribución de ganancias y comisiones",
    version="1.0.0",
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None
)

# Add middleware (order matters!)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Add your frontend URLs
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(locations_router, prefix="/api/v1")
app.include_router(staff_router, prefix="/api/v1")
app.include_router(catalog_router, prefix="/api/v1")
app.include_router(sales_router, prefix="/api/v1")
app.include_router(expenses_router, prefix="/api/v1")
app.include_router(incomes_router, prefix="/api/v1")
app.include_router(daily_closes_router, prefix="/api/v1")
app.include_router(settings_router, prefix="/api/v1")
app.include_router(financial_reports_router, prefix="/api/v1")
app.include_router(distribution_reports_router, prefix="/api/v1")
app.include_router(barbers_reports_router, prefix="/api/v1")

# Create database tables (only for development - use migrations in production)
if settings.ENVIRONMENT == "development":
    Base.metadata.create_all(bind=engine)

@app.get("/")
async def read_root():
    return {
        "message": "Nórdico API is running",
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy", "environment": settings.ENVIRONMENT}

@app.on_event("startup")
async def startup_event():
    logger.info("Nórdico API starting up...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    # Seed the chain's locations in development
    if settings.ENVIRONMENT == "development":
        db = SessionLocal()
        try:
            populate_locations(db)
        except Exception as e:
            logger.warning(f"Location seeding skipped or failed: {e}")
        finally:
            db.close()

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Nórdico API shutting down...")
