"""
Shared module package.

Cross-cutting concerns used across bounded contexts:
- Logging configuration
"""
