"""State scanners for the splitmatter scanner.

Each scanner is a mixin that provides the logic for one or more
ScanState values (DETECT, TOML/YAML, JSON, CONTENT/DONE).
"""

from __future__ import annotations

from splitmatter.lexer.scanners.content import ContentScannerMixin
from splitmatter.lexer.scanners.detect import DetectScannerMixin
from splitmatter.lexer.scanners.fence import FenceScannerMixin
from splitmatter.lexer.scanners.json import JsonScannerMixin

__all__ = [
    "ContentScannerMixin",
    "DetectScannerMixin",
    "FenceScannerMixin",
    "JsonScannerMixin",
]
