"""
Travel Dates API - Main FastAPI application
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from travel_dates import __version__
from travel_dates.utils.config import settings

# Load environment variables
load_dotenv()

# Create FastAPI app
app = FastAPI(
    title="Travel Dates API",
    description="Exact-range and flexible travel date selection for tour search",
    version=__version__
)

# CORS middleware - allow the tour search frontend to call our API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "service": "Travel Dates API",
        "status": "running",
        "version": __version__
    }


@app.get("/health")
async def health_check():
    """Detailed health check"""
    return {
        "status": "healthy",
        "api": "ok",
        "environment": settings.environment,
    }


# Import and include routers
from travel_dates.routes.travel_dates import router as travel_dates_router
app.include_router(travel_dates_router)
