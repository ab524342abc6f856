"""
Health check endpoints for container orchestration.

/health/fast has no dependencies on the rest of the console so it answers
even while the app is still starting.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health/fast")
async def fast_health():
    """Minimal healthcheck - always returns 200."""
    return JSONResponse(content={"ok": True}, status_code=200)


@router.get("/health")
async def health_check(request: Request):
    """Health check with the configured tailoring backend."""
    from datetime import datetime, timezone
    try:
        config = request.app.state.config
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "tailor-console",
            "backend_url": config.backend_url,
            "backend_env_source": config.backend_env_source,
            "tailor_endpoint": config.tailor_endpoint,
        }
    except Exception as e:
        return {
            "status": "degraded",
            "error": str(e),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
