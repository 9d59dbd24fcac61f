"""Tests for logging across unit-conversion-mcp components."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock, patch

from unit_conversion_mcp import serve
from unit_conversion_mcp.server.router import ExecutionRouter


class TestServeLogging:
    def test_startup_logged_at_info(self, caplog) -> None:
        with patch("unit_conversion_mcp.TransportManager") as mock_tm_cls:
            instance = MagicMock()
            instance.run_stdio = AsyncMock()
            mock_tm_cls.return_value = instance
            with caplog.at_level(logging.INFO, logger="unit_conversion_mcp"):
                serve(name="converter", version="1.2.3")

        assert "Starting MCP server 'converter' v1.2.3 with 1 tools via stdio" in caplog.text


class TestRouterLogging:
    async def test_call_logged_at_debug(self, registry, caplog) -> None:
        router = ExecutionRouter(registry)
        with caplog.at_level(logging.DEBUG, logger="unit_conversion_mcp"):
            await router.handle_call("unit_conversion", {"value": 1, "from_unit": "kg", "to_unit": "lb"})
        assert "Executing tool call: unit_conversion" in caplog.text

    async def test_conversion_failure_logged_at_debug(self, registry, caplog) -> None:
        router = ExecutionRouter(registry)
        with caplog.at_level(logging.DEBUG, logger="unit_conversion_mcp"):
            await router.handle_call("unit_conversion", {"value": 1, "from_unit": "kg", "to_unit": "m"})
        assert "CATEGORY_MISMATCH" in caplog.text

    async def test_nothing_logged_above_debug_for_bad_input(self, registry, caplog) -> None:
        router = ExecutionRouter(registry)
        with caplog.at_level(logging.INFO, logger="unit_conversion_mcp"):
            await router.handle_call("unit_conversion", {"value": 1, "from_unit": "cubits", "to_unit": "m"})
        assert caplog.records == []
