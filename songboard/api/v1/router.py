# ============================================================================
# FILE: songboard/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from songboard.api.v1.endpoints import auth, songs, genres, likes, recommendations

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(genres.router, prefix="/genres", tags=["genres"])
api_router.include_router(likes.router, prefix="/likes", tags=["likes"])
api_router.include_router(recommendations.router, prefix="/recommendations", tags=["recommendations"])
