"""
Confirmation Engine - FastAPI Application

Main entry point for the Confirmation Engine backend.

Architecture:
- Wizard JSON → CaseSchema → Case (SSOT, immutable)
- Case → Financial Aggregator → EstateTotals
- Case + EstateTotals → Inventory Builder → InventoryResult
- Case + EstateTotals → Declaration Composer → DeclarationOutput
- All of the above → Document Assembly → flat field mapping for form C1
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import eligibility_router, cases_router
from .database import init_db

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    init_db()
    yield

# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="Confirmation Engine",
    description="""
    Confirmation Engine - Scottish Confirmation (Form C1) Generator

    Turns structured estate data into the inventory, declaration and
    financial totals of form C1, mapped onto the form's field ids.

    ## Pipeline
    1. **Eligibility Gate**: screening answers → first hard stop, if any
    2. **Financial Aggregator**: Case → confirmation total, net value
    3. **Inventory Builder**: six mandatory sections, 37-line limit
    4. **Declaration Composer**: Executor Nominate / Dative paragraph
    5. **Document Assembly**: flat field-id → value mapping

    ## Key Principles
    - The Case is immutable; every output is recomputed from it
    - One confirmation total feeds inventory, declaration and box 11
    - Overflow and eligibility failures are hard stops, not errors
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(eligibility_router)
app.include_router(cases_router)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Confirmation Engine",
        "version": "1.0.0",
        "description": "Scottish Confirmation (Form C1) Generator",
        "docs": "/docs",
        "pipeline": {
            "eligibility": "POST /eligibility/check",
            "preview": "POST /cases/preview",
            "fields": "POST /cases/fields",
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


# For running with: python -m confirmation_engine.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
