"""
Persistence adapters.

Routers depend on repository objects handed to them by the application
factory instead of opening database sessions themselves.
"""
