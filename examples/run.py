"""Launch the unit conversion server over Streamable HTTP.

Usage (from the project root):
    PYTHONPATH=./src python examples/run.py

Then test with curl:
    curl http://localhost:8000/health
    curl -X POST http://localhost:8000/mcp/ \
        -H "Content-Type: application/json" \
        -H "Accept: application/json, text/event-stream" \
        -d '{"jsonrpc": "2.0", "id": 1, "method": "tools/list"}'

Set PRINT_OPENAI_TOOLS=1 to dump the OpenAI tool definitions instead of serving.
"""

import json
import os

from unit_conversion_mcp import convert, default_registry, serve, to_openai_tools

registry = default_registry()

if os.environ.get("PRINT_OPENAI_TOOLS"):
    print(json.dumps(to_openai_tools(registry, embed_annotations=True, strict=True), indent=2))
    raise SystemExit(0)

value, unit_type = convert(100.0, "celsius", "fahrenheit")
print(f"Sanity check:   100 celsius -> {value} fahrenheit ({unit_type})")
print(f"Tools exposed:  {', '.join(registry.list())}")

serve(
    registry,
    transport="streamable-http",
    host="127.0.0.1",
    port=8000,
    on_startup=lambda: print("Listening on http://127.0.0.1:8000/mcp"),
    on_shutdown=lambda: print("Server stopped"),
)
