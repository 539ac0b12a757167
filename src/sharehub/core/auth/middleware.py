"""Request context middleware.

This module provides middleware for:
- Request tracing with unique IDs
- Binding the caller's identity to the log context
"""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from sharehub.core.auth.backend import decode_token


if TYPE_CHECKING:
    from starlette.types import ASGIApp


class ActorContextMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes the token's subject to logging.

    Decodes the bearer token (if any) and stores the account id and role
    on ``request.state`` and in the structlog context. Authorization is
    not decided here; routes still go through the auth dependencies.
    """

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or [
            "/health",
            "/docs",
            "/redoc",
            "/openapi.json",
            "/api/v1/auth/login",
            "/api/v1/auth/signup",
        ]

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        # Skip for excluded paths
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        # Try to extract token from Authorization header
        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            token_data = decode_token(auth_header.split(" ", 1)[1])

            if token_data:
                request.state.account_id = token_data.account_id
                request.state.role = token_data.role.value

                # Bind to structlog context
                structlog.contextvars.bind_contextvars(
                    account_id=token_data.account_id,
                    role=token_data.role.value,
                )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    The request ID is added to:
    - request.state.request_id
    - Response header X-Request-ID
    - Structlog context
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        # Get request ID from header or generate new one
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        # Add to request state
        request.state.request_id = request_id
        request.state.trace_id = request_id  # Alias for error handler

        # Bind to structlog context
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            # Clear structlog context, even when the handler raised
            structlog.contextvars.unbind_contextvars("request_id", "account_id", "role")

        # Add to response header
        response.headers["X-Request-ID"] = request_id
        return response
