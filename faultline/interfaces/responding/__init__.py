"""
ASGI entry points for the responding bounded context.
"""
