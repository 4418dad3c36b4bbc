"""
Interfaces layer package.

Contains the ASGI middleware and FastAPI routers.
No business logic belongs here.
"""
