"""Main FastAPI application."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.bills import routes as bills_routes
from app.entries import routes as entries_routes
from app.insights import routes as insights_routes
from app.reports import routes as reports_routes

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Ledgerly API",
    description="Household bills, budgets and net worth",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(bills_routes.router, prefix=f"{settings.API_V1_PREFIX}/bills", tags=["Bills"])
app.include_router(entries_routes.router, prefix=f"{settings.API_V1_PREFIX}/entries", tags=["Entries"])
app.include_router(reports_routes.router, prefix=f"{settings.API_V1_PREFIX}/reports", tags=["Reports"])
app.include_router(insights_routes.router, prefix=f"{settings.API_V1_PREFIX}/insights", tags=["Insights"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Ledgerly API",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
