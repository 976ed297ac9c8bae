# FILE: ownshot/middleware/body_limit.py
"""
Body size limit middleware
"""
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject oversized uploads before the multipart body is parsed"""

    def __init__(self, app, max_size: int):
        super().__init__(app)
        self.max_size = max_size

    async def dispatch(self, request: Request, call_next):
        if request.method in ["POST", "PUT", "PATCH"]:
            content_length = request.headers.get("content-length")
            if content_length is not None:
                if not content_length.isdigit():
                    return JSONResponse(
                        status_code=400,
                        content={"error": "invalid_request", "message": "Invalid Content-Length header"}
                    )
                if int(content_length) > self.max_size:
                    logger.warning(f"Request body too large: {content_length} > {self.max_size}")
                    return JSONResponse(
                        status_code=413,
                        content={
                            "error": "payload_too_large",
                            "message": f"Request body exceeds {self.max_size // (1024 * 1024)}MB"
                        }
                    )

        return await call_next(request)
