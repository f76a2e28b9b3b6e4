import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

from app.core.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(message)s"
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "password-check-service"
SERVICE_VERSION = "1.0.0"

app = FastAPI(
    title="Password Check API",
    version=SERVICE_VERSION,
)

from app.middleware.cors import CORSHeadersMiddleware
from app.middleware.security import RequestLoggingMiddleware

# Last added runs first, so every request (pre-flights included) is logged.
app.add_middleware(CORSHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    logger.exception("unhandled_exception path=%s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
    )


@app.on_event("startup")
def startup():
    logger.info("Password Check API starting up")

    from app.dependencies.password import get_password_policy

    policy = get_password_policy(settings)
    logger.info(
        "Policy loaded: min_length=%s common_passwords=%d breach_api=%s fail_mode=%s",
        policy.min_length,
        len(policy.common_passwords),
        settings.hibp_password_api,
        settings.fail_mode.value,
    )


from app.routes.password import router as password_router

app.include_router(password_router)


@app.get("/health")
def health_check():
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }
