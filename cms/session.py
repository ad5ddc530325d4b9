"""Admin session marker helpers.

The admin area is guarded by a single shared credential pair. A successful
login stores a marker in the (signed cookie) session; logging out or losing
the cookie drops back to anonymous.
"""
import hmac
import logging

from django.conf import settings

logger = logging.getLogger(__name__)

SESSION_KEY = 'admin_session'
SESSION_MARKER = 'authenticated'


def is_admin(request):
    session = getattr(request, 'session', None)
    return session is not None and session.get(SESSION_KEY) == SESSION_MARKER


def check_credentials(username, password):
    """Match against ADMIN_USERNAME/ADMIN_PASSWORD, or an active AdminUser when those are unset."""
    if not isinstance(username, str) or not isinstance(password, str) or not username or not password:
        return False
    if settings.ADMIN_USERNAME and settings.ADMIN_PASSWORD:
        return (hmac.compare_digest(username.encode(), settings.ADMIN_USERNAME.encode())
                and hmac.compare_digest(password.encode(), settings.ADMIN_PASSWORD.encode()))
    from .models import AdminUser
    user = AdminUser.objects.filter(username=username, is_active=True).first()
    return user is not None and user.check_password(password)


def login_admin(request):
    request.session.cycle_key()
    request.session[SESSION_KEY] = SESSION_MARKER
    logger.info('Admin session started')


def logout_admin(request):
    request.session.flush()
    logger.info('Admin session ended')
