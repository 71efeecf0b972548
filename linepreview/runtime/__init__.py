"""Host runtime for line previews.

Settings persistence, language gating, debounce scheduling, and file
watching around the pure preview pipeline.
"""

from .config import PreviewSettings, load_settings
from .controller import DocumentSnapshot, PreviewController, PreviewUpdate

__all__ = [
    "DocumentSnapshot",
    "PreviewController",
    "PreviewSettings",
    "PreviewUpdate",
    "load_settings",
]
