"""AnnotationMapper: ToolHints → MCP ToolAnnotations."""

from __future__ import annotations

from mcp import types as mcp_types

from unit_conversion_mcp.registry import ToolHints

DEFAULT_HINTS = ToolHints()


class AnnotationMapper:
    """Maps a tool's behaviour hints onto MCP and OpenAI representations."""

    def to_mcp_annotations(self, hints: ToolHints | None, title: str | None = None) -> mcp_types.ToolAnnotations:
        """Convert ToolHints to an MCP ToolAnnotations model.

        Missing hints map to the MCP defaults (not read-only, not
        destructive, not idempotent, open world).
        """
        hints = hints or DEFAULT_HINTS
        return mcp_types.ToolAnnotations(
            title=title,
            readOnlyHint=hints.readonly,
            destructiveHint=hints.destructive,
            idempotentHint=hints.idempotent,
            openWorldHint=hints.open_world,
        )

    def to_description_suffix(self, hints: ToolHints | None) -> str:
        """Render non-default hints for clients without native annotation support.

        Returns:
            ``"\\n\\n[Annotations: key=value, ...]"``, or an empty string when
            every hint has its default value.
        """
        if hints is None:
            return ""

        parts = [
            f"{field}={str(getattr(hints, field)).lower()}"
            for field in ("readonly", "destructive", "idempotent", "open_world")
            if getattr(hints, field) != getattr(DEFAULT_HINTS, field)
        ]
        if not parts:
            return ""
        return f"\n\n[Annotations: {', '.join(parts)}]"
