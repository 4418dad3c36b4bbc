"""
Application layer for the responding bounded context.

Leaves first: classify_error, extract_diagnostics, log_error,
build_error_body, dispatch_request.
"""
