from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Open CORS policy for browser callers.

    - Answers every OPTIONS pre-flight with an empty 200
    - Adds the CORS headers to all other responses
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
