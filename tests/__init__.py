"""Test package for PDF Narrator.

Unit tests for isolated cleaning logic and integration tests for the HTTP
workflows.

Structure:
    - unit/: Stage, pipeline, parser, book and config tests
    - integration/: Upload and cleaning endpoints over ASGI

PDFs are generated in memory by fixtures in conftest.py, so no binary test
data is checked in. Leverages pytest with pytest-check for soft assertions.
"""
