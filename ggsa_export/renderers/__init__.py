"""Export renderers and their sandboxed template environment."""

from ggsa_export.renderers.environment import create_export_environment
from ggsa_export.renderers.html_renderer import (
    GgsaHtmlRenderer,
    RendererConfig,
    is_decimal_export,
)
from ggsa_export.renderers.registry import ExportRendererRegistry, TimesheetExporter
from ggsa_export.renderers.response import ExportResponse
from ggsa_export.renderers.sandbox import ExportPolicy, ExportSandboxedEnvironment

__all__ = [
    "ExportPolicy",
    "ExportRendererRegistry",
    "ExportResponse",
    "ExportSandboxedEnvironment",
    "GgsaHtmlRenderer",
    "RendererConfig",
    "TimesheetExporter",
    "create_export_environment",
    "is_decimal_export",
]
