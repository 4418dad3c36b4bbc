"""
Faultline — error-to-response translation layer for HTTP servers.

Application package root. Layered the same way as any other bounded
context in a hexagonal (ports & adapters) service.

Bounded contexts:
    - responding: Request dispatch, error classification, structured error
      bodies, diagnostic logging.

Layers:
    - domain: Entities, error capabilities, ports (ABCs).
    - application: Use cases (dispatch, body building, log formatting).
    - infrastructure: Adapters (content negotiation, HTML error pages).
    - interfaces: ASGI middleware and FastAPI routers.
    - shared: Cross-cutting concerns (logging).
"""
