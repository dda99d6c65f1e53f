"""Turn recoverable cart errors into console-friendly payloads."""
from typing import Any, Dict
import logging

from cartsim.errors import InputValidationError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        if isinstance(exc, InputValidationError):
            logger.info("Rejected console input: %s", exc.field_errors)
            details = list(exc.field_errors.values())
            message = details[0] if len(details) == 1 else exc.message
            return {
                "message": message,
                "fallback": False,
                "metadata": {"field_errors": dict(exc.field_errors), "context": context or {}},
            }

        logger.warning("Recovered from error in shopping session: %s", exc, exc_info=exc)
        return {
            "message": str(exc) or "Something went wrong. Please try again.",
            "fallback": True,
            "metadata": {"error": str(exc), "context": context or {}},
        }
