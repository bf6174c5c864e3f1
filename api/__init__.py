"""
API Package
===========
FastAPI application, page rendering and the htmx partial endpoints.
"""
