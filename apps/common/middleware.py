"""
Security and error handling middleware
"""

import logging
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin
from django.core.cache import cache
from django.conf import settings

logger = logging.getLogger(__name__)
security_logger = logging.getLogger('security')

# Stricter limits for credential endpoints: (requests, window seconds)
ENDPOINT_RATE_LIMITS = {
    '/api/member/login': {'limit': 10, 'window': 300},
    '/api/auth/login': {'limit': 10, 'window': 300},
    '/api/member/change-password': {'limit': 10, 'window': 300},
}


def get_client_ip(request):
    """Get client IP address"""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR', '127.0.0.1')


class SecurityMiddleware(MiddlewareMixin):
    """
    Rate limiting for API paths and security headers on every response
    """

    def __init__(self, get_response):
        self.get_response = get_response
        super().__init__(get_response)

    def __call__(self, request):
        if self._is_rate_limited(request):
            return self._rate_limit_response(request)

        response = self.get_response(request)
        self._add_security_headers(response)
        return response

    def _get_rate_limit(self, path):
        for path_prefix, limit_config in ENDPOINT_RATE_LIMITS.items():
            if path.startswith(path_prefix):
                return limit_config
        if path.startswith('/api/'):
            return {
                'limit': settings.RATE_LIMIT_MAX_REQUESTS,
                'window': settings.RATE_LIMIT_WINDOW_SECONDS,
            }
        return None

    def _is_rate_limited(self, request):
        """Check if request should be rate limited"""
        if not getattr(settings, 'RATELIMIT_ENABLE', True):
            return False

        rate_limit = self._get_rate_limit(request.path)
        if not rate_limit:
            return False  # No rate limiting for non-API paths

        ip_cache_key = f"rate_limit:ip:{get_client_ip(request)}:{request.path}"

        # add() only sets the key when absent, so the window starts at the first hit
        cache.add(ip_cache_key, 0, rate_limit['window'])
        try:
            requests_made = cache.incr(ip_cache_key)
        except ValueError:
            cache.set(ip_cache_key, 1, rate_limit['window'])
            requests_made = 1

        return requests_made > rate_limit['limit']

    def _rate_limit_response(self, request):
        """Return rate limit exceeded response"""
        security_logger.warning(
            f"RATE_LIMIT_EXCEEDED path={request.path} ip={get_client_ip(request)}"
        )
        response = JsonResponse({
            'code': 429,
            'msg': 'Too many requests from this IP, please try again later.',
            'data': None
        }, status=429)
        response['Retry-After'] = '60'
        return response

    def _add_security_headers(self, response):
        """Add security headers to response"""
        response['X-Frame-Options'] = 'DENY'
        response['X-Content-Type-Options'] = 'nosniff'
        response['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        # HSTS (only in production)
        if not getattr(settings, 'DEBUG', True):
            response['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

        if 'Server' in response:
            del response['Server']


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Generic 500 for exceptions escaping non-DRF API views
    """

    def process_exception(self, request, exception):
        logger.error(f"Exception in {request.path}: {str(exception)}", exc_info=True)

        if request.path.startswith('/api/'):
            return JsonResponse({
                'code': 500,
                'msg': 'Internal server error',
                'data': None
            }, status=500)

        return None  # Let Django handle non-API errors normally
