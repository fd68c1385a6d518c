"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from extraction.resume import acquisition


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "ocr: marks tests as requiring a tesseract binary (deselect with '-m \"not ocr\"')"
    )


@pytest.fixture(autouse=True)
def reset_acquisition_runtime():
    """Each test starts with an unconfigured OCR runtime."""
    acquisition._runtime = None
    yield
    acquisition._runtime = None


@pytest.fixture
def scenario_a_text():
    return (
        "John Smith\n"
        "john@x.com\n"
        "+1 555-123-4567\n"
        "Education\n"
        "MIT\n"
        "2018 - 2020\n"
        "Experience\n"
        "Acme Corp\n"
        "2020 - Present\n"
        "Built things"
    )
