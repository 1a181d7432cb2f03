"""Main API router"""

from fastapi import APIRouter

from .routes import auth, admin, todos, board, community, shop
from ..core.config import settings

# Main API router
api_router = APIRouter()

# Include all routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(todos.router, prefix="/todo", tags=["todo"])
api_router.include_router(board.router, prefix="/board", tags=["board"])
api_router.include_router(community.router, prefix="/community", tags=["community"])
api_router.include_router(shop.router, prefix="/shop", tags=["shop"])


@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.VERSION}
