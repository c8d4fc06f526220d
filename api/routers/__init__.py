"""
FastAPI routers grouped by resource.

Each module exposes an APIRouter that the application factory (app.py)
includes.
"""
