"""
Pytest configuration for DOCX Composer
"""

import logging
import sys

import pytest

from docx_composer import Document, Section


@pytest.fixture(autouse=True)
def configure_logging():
    """Route log records to the console and reset handlers after each test."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()
    package_logger = logging.getLogger("docx_composer")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def document():
    """Empty document registry."""
    return Document()


@pytest.fixture
def section(document):
    """First section of a fresh document."""
    return document.add_section()


@pytest.fixture
def standalone_section():
    """Section built without a document."""
    return Section(1)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to tests that carry no other marker."""
    for item in items:
        if "unit" not in item.keywords and "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
