# Middleware package init
"""
Rural Sports Backend: Middleware Package
=========================================

Middleware chain (request direction):
    [Rate Limit] → [Request ID] → [Access Log] → [GZip] → [CORS] → route

    1. Rate limit first, so rejected requests cost nothing downstream
    2. Request ID before logging, so every access line carries it
    3. The access log wraps the route and sees the final status code
"""
