"""
Request/response logging middleware.
"""

import time
from fastapi import Request
from app.utils.logger import get_logger

logger = get_logger(__name__)

async def log_requests(request: Request, call_next):
    """Log method, path, status and latency of every request."""
    start_time = time.time()

    logger.info(f"Request: {request.method} {request.url.path}")
    logger.debug(f"Query: {dict(request.query_params)}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(f"Response: {response.status_code} {request.method} {request.url.path} - {process_time:.3f}s")
    response.headers["X-Process-Time"] = f"{process_time:.3f}"

    return response
