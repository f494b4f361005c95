import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .routes import chat_router, eligibility_router, schemes_router
from .services.catalog_service import catalog_service

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    snapshot = catalog_service.load()
    logger.info(f"Serving {len(snapshot.schemes)} schemes")
    yield
    # Shutdown
    logger.info("SchemeSeeker API stopped")


app = FastAPI(
    title=settings.app_name,
    description="Eligibility scoring, scheme recommendations and chat guidance for government welfare schemes",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(eligibility_router, prefix=settings.api_prefix)
app.include_router(schemes_router, prefix=settings.api_prefix)
app.include_router(chat_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {"message": "SchemeSeeker API is running", "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "schemeseeker", "catalog": catalog_service.health_check()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("schemeseeker.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
