# ============================================================================
# FILE: songboard/main.py
# ============================================================================
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from songboard.api.v1.router import api_router
from songboard.core.errors import register_error_handlers
from songboard.core.logging import setup_logging
from songboard.config import settings
import logging
import os

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title=settings.APP_NAME,
    description="Shared music board with likes and recommendations",
    version="1.0.0"
)

# CORS middleware (cookies need explicit origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include API v1 router
app.include_router(api_router, prefix="/api/v1")

# Serve the built frontend (if it exists)
frontend_path = os.path.abspath(settings.FRONTEND_DIR)
assets_path = os.path.join(frontend_path, "assets")
if os.path.exists(assets_path):
    app.mount("/assets", StaticFiles(directory=assets_path), name="assets")

@app.on_event("startup")
async def startup_event():
    """Create tables and import the seed file on first start"""
    logger.info(f"Starting {settings.APP_NAME}")
    from songboard.db.base import Base, import_models
    from songboard.db.session import engine, SessionLocal
    from songboard.db.snapshot import load_seed_file
    
    import_models()
    Base.metadata.create_all(bind=engine)
    
    if settings.SEED_FILE:
        db = SessionLocal()
        try:
            load_seed_file(db, settings.SEED_FILE)
        finally:
            db.close()

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME}")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/")
async def serve_frontend():
    """Serve the frontend HTML file"""
    frontend_file = os.path.join(frontend_path, "index.html")
    if os.path.exists(frontend_file):
        return FileResponse(frontend_file)
    return {"message": settings.APP_NAME, "version": "1.0.0", "docs": "/docs"}
