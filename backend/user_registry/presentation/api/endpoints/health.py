"""Health check endpoint."""

from fastapi import APIRouter, Depends, Request

from user_registry.infrastructure.database import Database, get_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    request: Request,
    database: Database = Depends(get_database),
) -> dict:
    """Returns the current application health status and store reachability."""
    settings = request.app.state.settings
    reachable = await database.ping()
    return {
        "status": "healthy" if reachable else "degraded",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": "reachable" if reachable else "unreachable",
    }
