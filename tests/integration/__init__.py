"""Integration tests for components working together as a system.

No mocks for core functionality - tests real interactions.

Coverage:
    - PDF upload from multipart request to cleaned book
    - Text cleaning endpoint in document and page mode
    - Upload limits, CORS and error responses

Requests go through httpx's ASGI transport; no running server is needed.
"""
