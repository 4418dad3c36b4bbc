"""
Application layer package.

Use cases coordinate domain entities and ports. No framework imports.
"""
