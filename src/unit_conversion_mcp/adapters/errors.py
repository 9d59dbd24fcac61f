"""ErrorMapper: tool exceptions → MCP error responses."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from unit_conversion_mcp.constants import ErrorCodes


class ToolNotFoundError(Exception):
    """Raised when a call names a tool that is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Tool not found: {name}")
        self.code = ErrorCodes["TOOL_NOT_FOUND"]
        self.message = f"Tool not found: {name}"
        self.details: dict[str, Any] = {"tool": name}


class ErrorMapper:
    """Maps exceptions escaping a tool to MCP error response dictionaries."""

    def to_mcp_error(self, error: Exception) -> dict[str, Any]:
        """
        Convert any exception to an MCP error response dict.

        Returns:
            dict with keys:
                - is_error: True
                - error_type: str (error code or "INTERNAL_ERROR")
                - message: str (safe error message)
                - details: dict | None (optional additional context)
        """
        if hasattr(error, "code") and hasattr(error, "message") and hasattr(error, "details"):
            return self._handle_coded_error(error)

        # Unknown exception - sanitize completely
        return {
            "is_error": True,
            "error_type": ErrorCodes["INTERNAL_ERROR"],
            "message": "Internal error occurred",
            "details": None,
        }

    def _handle_coded_error(self, error: Any) -> dict[str, Any]:
        code = error.code
        details = error.details if error.details else None

        if code == ErrorCodes["INVALID_ARGUMENTS"] and details:
            message = "Invalid arguments: " + format_validation_errors(details.get("errors", []))
        else:
            message = error.message

        return {
            "is_error": True,
            "error_type": code,
            "message": message,
            "details": details,
        }


def validation_errors_from_pydantic(error: ValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into ``{"field", "message"}`` dicts."""
    errors = []
    for item in error.errors():
        loc = ".".join(str(part) for part in item.get("loc", ()))
        errors.append({"field": loc or "arguments", "message": item.get("msg", "invalid")})
    return errors


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Format field-level errors as ``"field: message; field: message"``."""
    if not errors:
        return "validation failed"
    return "; ".join(f"{err.get('field', 'unknown')}: {err.get('message', 'invalid')}" for err in errors)
