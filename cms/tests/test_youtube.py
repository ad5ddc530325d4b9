from django.test import SimpleTestCase

from cms.youtube import youtube_embed_url, youtube_thumbnail_url, youtube_video_id

VIDEO_ID = 'dQw4w9WgXcQ'


class YoutubeVideoIdTests(SimpleTestCase):

    def test_recognised_url_shapes(self):
        urls = [
            f'https://www.youtube.com/watch?v={VIDEO_ID}',
            f'https://www.youtube.com/watch?v={VIDEO_ID}&t=42s',
            f'https://youtu.be/{VIDEO_ID}',
            f'https://youtu.be/{VIDEO_ID}?si=share',
            f'https://www.youtube.com/embed/{VIDEO_ID}',
            f'https://www.youtube.com/v/{VIDEO_ID}',
            f'https://www.youtube.com/u/w/{VIDEO_ID}',
            f'https://www.youtube.com/watch?v={VIDEO_ID}#comments',
        ]
        for url in urls:
            with self.subTest(url=url):
                self.assertEqual(youtube_video_id(url), VIDEO_ID)

    def test_no_match(self):
        for url in ['', None, 'https://vimeo.com/123456', 'https://www.youtube.com/watch?v=short',
                    'https://www.youtube.com/channel/UCabc']:
            with self.subTest(url=url):
                self.assertIsNone(youtube_video_id(url))

    def test_thumbnail_and_embed_urls(self):
        self.assertEqual(youtube_thumbnail_url(VIDEO_ID), f'https://img.youtube.com/vi/{VIDEO_ID}/maxresdefault.jpg')
        self.assertEqual(youtube_embed_url(VIDEO_ID), f'https://www.youtube.com/embed/{VIDEO_ID}')
