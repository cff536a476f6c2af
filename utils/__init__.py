"""Utility package for QR Toolbox.

This package exposes the QR rendering helpers and the two converters used
throughout the application.
"""

from .naming_converter import NamingConvention, convert, convert_all, detect, tokenize
from .qr_generator import export_batch, qr_png_bytes
from .timestamp_converter import convert_timestamp

__all__ = [
    "NamingConvention",
    "convert",
    "convert_all",
    "convert_timestamp",
    "detect",
    "export_batch",
    "qr_png_bytes",
    "tokenize",
]
