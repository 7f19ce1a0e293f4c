"""
API module.

FastAPI application exposing query, on-demand ingestion and health endpoints.
"""
