"""
Responding bounded context — domain layer.

- Request / Response entities and the deployment Environment
- Abort and Debuggable error capabilities
- Ports for the downstream handler, page renderer and content negotiator
"""
