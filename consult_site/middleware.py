from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import redirect

from cms.session import is_admin

GATED_PREFIXES = ('/admin/', '/api/admin/')
OPEN_PATHS = frozenset({'/admin/login', '/api/admin/login'})


def is_gated(path):
    """True when the path belongs to the admin area and is not a login route."""
    normalized = path.rstrip('/') or '/'
    if normalized in OPEN_PATHS:
        return False
    return normalized == '/admin' or any(path.startswith(prefix) for prefix in GATED_PREFIXES)


class AdminSessionMiddleware:
    """
    Sends anonymous requests for admin pages to the login page and answers
    admin API calls with a 401.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if is_gated(request.path) and not is_admin(request):
            if request.path.startswith('/api/'):
                return JsonResponse({'authenticated': False, 'error': 'Authentication required'}, status=401)
            return redirect(settings.ADMIN_LOGIN_URL)
        return self.get_response(request)
