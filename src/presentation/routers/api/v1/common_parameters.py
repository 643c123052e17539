"""Common parameters declared on every v1 operation.

All of them are optional and documented in OpenAPI. None is enforced:
the correlation ID is handled by CorrelationIdMiddleware, the user context
is informational only, and the bearer token is documented for clients but
never verified (no authentication in this service).
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Documents the "Bearer" security scheme; missing or malformed tokens are ignored
bearer_scheme_optional = HTTPBearer(
    auto_error=False,
    scheme_name="Bearer",
    bearerFormat="JWT",
    description=(
        "JWT Authorization header using the Bearer scheme. "
        "Example: 'Bearer eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...'"
    ),
)


async def common_parameters(
    correlation_id: Annotated[
        UUID | None,
        Header(
            alias="Correlation-Id",
            description=(
                "Optional correlation ID for request tracking. If not provided, "
                "a new UUID is generated and returned in the response headers."
            ),
            examples=["12345678-1234-1234-1234-123456789abc"],
        ),
    ] = None,
    user_context: Annotated[
        str | None,
        Header(
            alias="User-Context",
            description=(
                "User context containing user identification and role "
                "information in the format: username|role"
            ),
            examples=["user@example.com|Admin"],
        ),
    ] = None,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme_optional)
    ] = None,
) -> None:
    """Declare the common parameters for OpenAPI; values are not used."""
