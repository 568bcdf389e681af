"""
Test package for the task bridge

This package contains unit tests for the persistence services, the
dispatcher tests and the CLI/serve tests.
"""

# Shared test constants
DEFAULT_HEADERS = ["company", "title", "status"]

SAMPLE_RECORDS = [
    {"company": "Acme Corp", "title": "Senior \"Rockstar\" Engineer", "status": "applied"},
    {"company": "Globex", "title": "QA Lead", "status": "skipped"},
]

__all__ = [
    "DEFAULT_HEADERS",
    "SAMPLE_RECORDS",
]
