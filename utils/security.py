"""
Security Module - Request origin helpers and response hardening
"""

from flask import request


def get_client_ip():
    """
    Get client IP address

    X-Forwarded-For is honoured only when PROXY_FIX_X_FOR is set, in which
    case ProxyFix has already rewritten remote_addr.
    """
    return request.remote_addr or 'unknown'


def add_security_headers(response):
    """Add security headers to all responses"""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'DENY'
    response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
    return response


__all__ = [
    'get_client_ip',
    'add_security_headers'
]
