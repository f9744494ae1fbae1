"""
Main FastAPI application entry point.
"""

from fastapi import FastAPI

from rent_vs_invest import __version__
from rent_vs_invest.config import get_settings
from rent_vs_invest.logging_config import configure_logging
from rent_vs_invest.api import router as api_router

settings = get_settings()
configure_logging(settings.log_level)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Compare keeping a rental property with selling and reinvesting",
    version=__version__,
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("rent_vs_invest.main:app", host=settings.host, port=settings.port)
