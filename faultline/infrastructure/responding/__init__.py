"""
Adapters for the responding bounded context.
"""
