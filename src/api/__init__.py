"""FastAPI endpoints for the PDF narrator.

HTTP routes around the text cleaning pipeline. Nothing is persisted; every
response is computed from the request alone.

Endpoints:
    - GET /health: Service health status
    - POST /upload/pdf: Upload a PDF and get its cleaned text
    - POST /clean: Clean already extracted text
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
