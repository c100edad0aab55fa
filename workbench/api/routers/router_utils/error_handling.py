"""
Router error handling utilities.

Provides a decorator that maps application exceptions onto HTTP errors
consistently across all endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from workbench.core.exceptions import (
    AuthenticationError,
    ResourceNotFoundError,
    TextGenerationError,
    UsernameTakenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """
    Decorator to transform service exceptions into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Hiding internal error details from clients on 500s
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ResourceNotFoundError as e:
            logger.warning("Resource not found", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AuthenticationError as e:
            logger.warning("Authentication failed", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)

        except UsernameTakenError as e:
            logger.warning("Username conflict", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except TextGenerationError as e:
            logger.error("Upstream generation failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Failed to generate response",
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in request handler",
                extra={"handler": func.__name__, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
