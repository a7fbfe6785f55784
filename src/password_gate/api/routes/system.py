import logging
from typing import Any

from fastapi import APIRouter

from password_gate.validator import get_validator

logger = logging.getLogger(__name__)
router = APIRouter(tags=["system"])


@router.get("/system/health")
def health_check() -> dict[str, Any]:
    """Check that the password policy is loaded."""
    checks: dict[str, Any] = {}

    try:
        config = get_validator().config
        checks["policy"] = "ok"
        checks["denylist_size"] = len(config.denylist)
        checks["banned_substrings"] = len(config.banned_substrings)
    except Exception as e:
        logger.error("Policy health check failed: %s", e)
        checks["policy"] = f"error: {e}"

    return {
        "status": "healthy" if checks["policy"] == "ok" else "degraded",
        "checks": checks,
    }
