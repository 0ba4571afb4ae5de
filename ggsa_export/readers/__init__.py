"""Readers loading export data from files."""

from ggsa_export.readers.payload_reader import (
    ExportDataset,
    ExportPayload,
    PayloadReferenceError,
    read_payload,
    resolve_payload,
)

__all__ = [
    "ExportDataset",
    "ExportPayload",
    "PayloadReferenceError",
    "read_payload",
    "resolve_payload",
]
