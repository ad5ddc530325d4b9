"""Request/response plumbing shared by the JSON API views."""
import functools
import inspect
import json
import logging

from django.core.exceptions import ValidationError
from django.http import Http404, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

logger = logging.getLogger(__name__)

DEFAULT_ERROR = 'Internal server error'


class PayloadError(Exception):
    """The request body is unusable. Rendered as a 400 with ``payload`` as the JSON body."""

    def __init__(self, message, payload=None):
        super().__init__(message)
        self.payload = payload or {'error': message}


def read_json(request):
    if not request.body:
        return {}
    try:
        payload = json.loads(request.body)
    except (UnicodeDecodeError, ValueError):
        raise PayloadError('Invalid JSON body')
    if not isinstance(payload, dict):
        raise PayloadError('Expected a JSON object')
    return payload


def require_id(payload, message):
    value = payload.get('id')
    if value in (None, ''):
        raise PayloadError(message)
    return value


def get_or_404(model, message, **lookup):
    queryset = model._default_manager.all() if isinstance(model, type) else model
    try:
        return queryset.get(**lookup)
    except (queryset.model.DoesNotExist, ValueError, TypeError, ValidationError):
        raise Http404(message)


def save_valid(form, commit=True):
    if not form.is_valid():
        payload = form.error_payload()
        raise PayloadError(payload['error'], payload)
    return form.save(commit=commit)


def _error_response(request, exc, errors):
    if isinstance(exc, PayloadError):
        return JsonResponse(exc.payload, status=400)
    if isinstance(exc, Http404):
        return JsonResponse({'error': str(exc) or 'Not found'}, status=404)
    message = errors.get(request.method, DEFAULT_ERROR)
    logger.exception('%s %s failed: %s', request.method, request.path, message)
    return JsonResponse({'error': message}, status=500)


def api_endpoint(*methods, errors=None):
    """
    Wrap a JSON API view.

    Restricts the HTTP methods, exempts the view from CSRF (the API is called
    with JSON bodies, not forms), and turns exceptions into JSON responses:
    ``PayloadError`` -> 400, ``Http404`` -> 404, anything else is logged and
    answered with a 500 carrying the message registered for that method.
    Works for both sync and async views.
    """
    errors = errors or {}

    def decorator(view):
        if inspect.iscoroutinefunction(view):
            @functools.wraps(view)
            async def wrapper(request, *args, **kwargs):
                try:
                    return await view(request, *args, **kwargs)
                except Exception as exc:
                    return _error_response(request, exc, errors)
        else:
            @functools.wraps(view)
            def wrapper(request, *args, **kwargs):
                try:
                    return view(request, *args, **kwargs)
                except Exception as exc:
                    return _error_response(request, exc, errors)
        return csrf_exempt(require_http_methods(list(methods))(wrapper))
    return decorator
