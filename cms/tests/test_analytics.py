from datetime import timedelta
from unittest import mock

from django.test import SimpleTestCase
from django.utils import timezone

from cms.analytics import StatsAggregator, clamp_days
from cms.models import BlogPost, ContactMessage, NewsletterSubscription, PageView

from .base import ApiTestCase


class ClampDaysTests(SimpleTestCase):

    def test_clamping(self):
        cases = [(None, 30), ('', 30), ('abc', 30), ('0', 30), ('-5', 30), ('1', 1), ('7', 7),
                 ('365', 365), ('10000', 365)]
        for raw, expected in cases:
            with self.subTest(raw=raw):
                self.assertEqual(clamp_days(raw), expected)


class TrackApiTests(ApiTestCase):

    def test_track_page_view(self):
        response = self.post_json(
            '/api/analytics/track',
            {'path': '/blog/3', 'title': 'Blog post', 'contentType': 'blog', 'contentId': '3'},
            HTTP_USER_AGENT='Mozilla/5.0',
            HTTP_X_FORWARDED_FOR='203.0.113.5, 10.0.0.1',
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {'success': True})
        view = PageView.objects.get()
        self.assertEqual(view.path, '/blog/3')
        self.assertEqual(view.content_type, 'blog')
        self.assertEqual(view.user_agent, 'Mozilla/5.0')
        self.assertEqual(view.ip_address, '203.0.113.5')

    def test_real_ip_header(self):
        self.post_json('/api/analytics/track', {'path': '/'}, HTTP_X_REAL_IP='198.51.100.7')
        self.assertEqual(PageView.objects.get().ip_address, '198.51.100.7')

    def test_path_required(self):
        response = self.post_json('/api/analytics/track', {'title': 'No path'})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(PageView.objects.exists())


class StatsApiTests(ApiTestCase):

    def setUp(self):
        PageView.objects.create(path='/', title='Home', content_type='page')
        PageView.objects.create(path='/', title='Home', content_type='page')
        PageView.objects.create(path='/blog/1', title='First post', content_type='blog')
        old = PageView.objects.create(path='/old', title='Old')
        PageView.objects.filter(pk=old.pk).update(viewed_at=timezone.now() - timedelta(days=60))

        BlogPost.objects.create(title='Live', content='<p>x</p>', is_published=True)
        BlogPost.objects.create(title='Draft', content='<p>x</p>')
        ContactMessage.objects.create(name='A', email='a@example.com', message='hi')
        NewsletterSubscription.objects.create(email='a@b.com')
        NewsletterSubscription.objects.create(email='c@d.com', is_active=False)

    def test_stats(self):
        response = self.get_json('/api/analytics/stats', {'days': '7'})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['days'], 7)
        self.assertEqual(data['totalPageViews'], 4)
        self.assertEqual(data['periodPageViews'], 3)
        self.assertEqual(len(data['pageViewsByDay']), 1)
        self.assertEqual(data['pageViewsByDay'][0]['views'], 3)
        self.assertEqual(data['topPages'][0], {'path': '/', 'title': 'Home', 'views': 2})
        self.assertEqual(data['viewsByContentType'], [{'type': 'page', 'views': 2}, {'type': 'blog', 'views': 1}])
        self.assertEqual(data['counts'], {
            'blogPosts': 1,
            'publications': 0,
            'masterclasses': 0,
            'services': 0,
            'contacts': 1,
            'newsletters': 1,
            'registrations': 0,
        })

    def test_days_clamped(self):
        for raw, expected in (('0', 30), ('-5', 30), ('10000', 365), ('junk', 30)):
            with self.subTest(days=raw):
                self.assertEqual(self.get_json('/api/analytics/stats', {'days': raw}).json()['days'], expected)
        data = self.get_json('/api/analytics/stats', {'days': '90'}).json()
        self.assertEqual(data['periodPageViews'], 4)

    def test_failed_sub_query_uses_fallback(self):
        with mock.patch.object(StatsAggregator, 'page_views_by_day', side_effect=RuntimeError('group by failed')):
            with self.assertLogs('cms.analytics', level='ERROR'):
                response = self.get_json('/api/analytics/stats')
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['pageViewsByDay'], [])
        self.assertEqual(data['totalPageViews'], 4)
        self.assertEqual(data['topPages'][0]['path'], '/')

    def test_every_sub_query_failing_still_answers(self):
        with mock.patch.object(StatsAggregator, '_guarded', side_effect=self.fallback_only):
            data = self.get_json('/api/analytics/stats').json()
        self.assertEqual(data['totalPageViews'], 0)
        self.assertEqual(data['topPages'], [])
        self.assertEqual(data['counts']['blogPosts'], 0)

    @staticmethod
    async def fallback_only(key, query, fallback):
        return fallback

    def test_failure_outside_fan_out_is_500(self):
        with mock.patch.object(StatsAggregator, 'collect', side_effect=RuntimeError('boom')):
            with self.assertLogs('cms.http', level='ERROR'):
                response = self.get_json('/api/analytics/stats')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'error': 'Failed to fetch analytics'})
