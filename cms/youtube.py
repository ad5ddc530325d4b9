"""YouTube URL parsing.

Accepted shapes (anything may precede the marker, a trailing query string or
fragment after the id is ignored):

    https://youtu.be/<id>
    https://www.youtube.com/v/<id>
    https://www.youtube.com/u/<letter>/<id>
    https://www.youtube.com/embed/<id>
    https://www.youtube.com/watch?v=<id>

A video id is exactly 11 characters; any other result is "no match".
"""
import re

YOUTUBE_URL_RE = re.compile(r'^.*((youtu\.be/)|(v/)|(/u/\w/)|(embed/)|(watch\?))\??v?=?([^#&?]*).*')
VIDEO_ID_LENGTH = 11
THUMBNAIL_URL = 'https://img.youtube.com/vi/{video_id}/maxresdefault.jpg'
EMBED_URL = 'https://www.youtube.com/embed/{video_id}'


def youtube_video_id(url):
    """Return the 11-character video id in ``url`` or ``None``."""
    if not url:
        return None
    match = YOUTUBE_URL_RE.match(url)
    if match and len(match.group(7)) == VIDEO_ID_LENGTH:
        return match.group(7)
    return None


def youtube_thumbnail_url(video_id):
    return THUMBNAIL_URL.format(video_id=video_id)


def youtube_embed_url(video_id):
    return EMBED_URL.format(video_id=video_id)
