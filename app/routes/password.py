import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.core.policy import PasswordPolicy
from app.core.settings import Settings, get_settings
from app.dependencies.password import get_breach_provider, get_password_policy
from app.models.password import ErrorResponse
from app.services.breach.base import BreachProvider, BreachServiceUnavailable
from app.services.password_check import assess_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Password Security"])


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


@router.post("/check-password")
async def check_password(
    request: Request,
    policy: PasswordPolicy = Depends(get_password_policy),
    provider: BreachProvider = Depends(get_breach_provider),
    settings: Settings = Depends(get_settings),
):
    # The password itself must never reach the logs.
    try:
        payload = await request.json()

        password = payload.get("password") if isinstance(payload, dict) else None
        if not password or not isinstance(password, str):
            return error_response(400, "Password is required")

        assessment = await run_in_threadpool(
            assess_password,
            password,
            policy,
            provider,
            settings.fail_mode,
        )
    except BreachServiceUnavailable:
        logger.error("Rejecting password check, breach service unavailable (fail-closed)")
        return error_response(503, "Password breach service unavailable")
    except Exception as exc:
        # exception text can quote the request body, so only the type is logged
        logger.error("password_check_failed error=%s", exc.__class__.__name__)
        return error_response(500, "Internal server error", str(exc))

    logger.info(
        "password_checked weak=%s breached=%s api_error=%s",
        assessment.is_weak,
        assessment.is_breached,
        bool(assessment.api_error),
    )
    return JSONResponse(content=assessment.to_response())
