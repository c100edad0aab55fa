"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""
