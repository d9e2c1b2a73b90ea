"""
API layer.

FastAPI application factory, routers, dependencies, and error mapping.
"""
