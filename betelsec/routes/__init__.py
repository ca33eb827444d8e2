"""
FastAPI routers for all API endpoints.

Each module defines a router for one part of the risk assessment flow.
"""
