#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip tests that need a real tesseract binary
    python -m pytest tests/ -v -m "not ocr"

    # Using unittest
    python -m unittest discover tests -v

OCR Setup:
    OCR tests mock pytesseract unless marked `ocr`. Those run against a real
    tesseract binary when one is found on PATH (or via TESSERACT_CMD) and are
    skipped otherwise. Set SKIP_OCR_TESTS=true to skip them unconditionally.
"""

import os
import shutil
from typing import Optional

SKIP_OCR_TESTS = os.environ.get("SKIP_OCR_TESTS", "false").lower() == "true"


def is_tesseract_available() -> bool:
    """Return True if a tesseract binary can be located."""
    if SKIP_OCR_TESTS:
        return False
    return bool(os.environ.get("TESSERACT_CMD") or shutil.which("tesseract"))


# Global flag to cache tesseract availability check
_tesseract_available: Optional[bool] = None


def check_tesseract_available() -> bool:
    """Cached check for tesseract availability."""
    global _tesseract_available
    if _tesseract_available is None:
        _tesseract_available = is_tesseract_available()
    return _tesseract_available
