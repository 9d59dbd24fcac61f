"""Shared constants: error codes and tool naming rules."""

from __future__ import annotations

import re
from types import MappingProxyType

ERROR_CODES = MappingProxyType(
    {
        "UNKNOWN_UNIT": "UNKNOWN_UNIT",
        "CATEGORY_MISMATCH": "CATEGORY_MISMATCH",
        "INVALID_ARGUMENTS": "INVALID_ARGUMENTS",
        "TOOL_NOT_FOUND": "TOOL_NOT_FOUND",
        "INTERNAL_ERROR": "INTERNAL_ERROR",
    }
)

# Alias kept for call sites that read like ``ErrorCodes["UNKNOWN_UNIT"]``.
ErrorCodes = ERROR_CODES

# Tool names must also be valid OpenAI function names.
TOOL_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")

UNIT_CONVERSION_TOOL = "unit_conversion"
