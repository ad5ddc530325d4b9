"""Forward admin image uploads to Cloudinary and hand back the hosted URL."""
import logging
import os
import uuid

import cloudinary
import cloudinary.uploader
from django.conf import settings
from django.utils.text import slugify

logger = logging.getLogger(__name__)

DEFAULT_FOLDER = 'uploads'


class UploadError(Exception):
    status = 400


class InvalidUpload(UploadError):
    pass


class UploadTooLarge(UploadError):
    status = 413


class UploadNotConfigured(UploadError):
    status = 503


class UploadFailed(UploadError):
    status = 502


def is_configured():
    return bool(settings.CLOUDINARY_CLOUD_NAME and settings.CLOUDINARY_API_KEY and settings.CLOUDINARY_API_SECRET)


def validate_upload(upload_file):
    if upload_file is None:
        raise InvalidUpload('No file provided')
    if upload_file.content_type not in settings.UPLOAD_ALLOWED_TYPES:
        raise InvalidUpload('Invalid file type')
    if upload_file.size > settings.UPLOAD_MAX_BYTES:
        raise UploadTooLarge('File size too large (max 10MB)')


def upload_image(upload_file, folder=None):
    """Validate and upload one image. Returns ``{'url', 'public_id', 'filename'}``."""
    validate_upload(upload_file)
    if not is_configured():
        raise UploadNotConfigured('Media upload provider is not configured')

    folder = slugify(folder or '') or DEFAULT_FOLDER
    orig_name, ext = os.path.splitext(upload_file.name)
    ext = ext.lower().lstrip('.')
    public_id = f"{slugify(orig_name) or 'image'}_{uuid.uuid4().hex}"

    cloudinary.config(
        cloud_name=settings.CLOUDINARY_CLOUD_NAME,
        api_key=settings.CLOUDINARY_API_KEY,
        api_secret=settings.CLOUDINARY_API_SECRET,
        secure=True,
    )
    try:
        result = cloudinary.uploader.upload(
            upload_file,
            folder=folder,
            public_id=public_id,
            resource_type='image',
        )
    except Exception as exc:
        logger.exception('Cloudinary upload failed for %s', upload_file.name)
        raise UploadFailed('Failed to upload file') from exc

    logger.info('Uploaded %s to %s', upload_file.name, result.get('public_id'))
    return {
        'url': result['secure_url'],
        'public_id': result['public_id'],
        'filename': f"{public_id}.{ext}" if ext else public_id,
    }
