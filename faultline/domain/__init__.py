"""
Domain layer package.

Contains entities, error capabilities and port interfaces.
No IO, no side effects.
"""
