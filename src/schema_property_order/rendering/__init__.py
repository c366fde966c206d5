"""Rendering exports."""

from .document_renderer import RenderExecutionError, execute_render, render_schema_document
from .render_contracts import RenderOutcome, RenderRequest

__all__ = [
    "RenderExecutionError",
    "RenderOutcome",
    "RenderRequest",
    "execute_render",
    "render_schema_document",
]
