"""Dashboard statistics over the page view log.

Each figure is its own query. They are started together and awaited as a
group; a query that fails is logged and replaced by its fallback value so
the rest of the dashboard still renders.
"""
import asyncio
import logging
from datetime import timedelta

from django.db.models import Count
from django.db.models.functions import TruncDate
from django.utils import timezone

from .models import (
    BlogPost, Book, ConsultancyService, ContactMessage, Masterclass, MasterclassRegistration,
    NewsletterSubscription, PageView,
)

logger = logging.getLogger(__name__)

DEFAULT_DAYS = 30
MAX_DAYS = 365
TOP_PAGES_LIMIT = 10


def clamp_days(raw):
    """Parse the ``days`` query value: missing, junk or < 1 means 30, anything above 365 means 365."""
    try:
        days = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_DAYS
    if days < 1:
        return DEFAULT_DAYS
    return min(days, MAX_DAYS)


class StatsAggregator:

    def __init__(self, days=DEFAULT_DAYS, now=None):
        self.days = days
        self.since = (now or timezone.now()) - timedelta(days=days)

    def in_window(self):
        return PageView.objects.filter(viewed_at__gte=self.since)

    async def total_page_views(self):
        return await PageView.objects.acount()

    async def period_page_views(self):
        return await self.in_window().acount()

    async def page_views_by_day(self):
        rows = (self.in_window()
                .annotate(day=TruncDate('viewed_at'))
                .values('day')
                .annotate(views=Count('id'))
                .order_by('day'))
        return [{'date': row['day'].isoformat(), 'views': row['views']} async for row in rows]

    async def top_pages(self):
        rows = (self.in_window()
                .values('path', 'title')
                .annotate(views=Count('id'))
                .order_by('-views', 'path')[:TOP_PAGES_LIMIT])
        return [{'path': row['path'], 'title': row['title'] or row['path'], 'views': row['views']}
                async for row in rows]

    async def views_by_content_type(self):
        rows = (self.in_window()
                .filter(content_type__isnull=False)
                .values('content_type')
                .annotate(views=Count('id'))
                .order_by('-views', 'content_type'))
        return [{'type': row['content_type'], 'views': row['views']} async for row in rows]

    async def blog_posts(self):
        return await BlogPost.objects.filter(is_published=True).acount()

    async def publications(self):
        return await Book.objects.filter(is_active=True).acount()

    async def masterclasses(self):
        return await Masterclass.objects.filter(is_active=True).acount()

    async def services(self):
        return await ConsultancyService.objects.filter(is_active=True).acount()

    async def contacts(self):
        return await ContactMessage.objects.acount()

    async def newsletters(self):
        return await NewsletterSubscription.objects.filter(is_active=True).acount()

    async def registrations(self):
        return await MasterclassRegistration.objects.acount()

    def queries(self):
        """(response key, query, fallback) for every figure on the dashboard."""
        return [
            ('totalPageViews', self.total_page_views, 0),
            ('periodPageViews', self.period_page_views, 0),
            ('pageViewsByDay', self.page_views_by_day, []),
            ('topPages', self.top_pages, []),
            ('viewsByContentType', self.views_by_content_type, []),
            ('blogPosts', self.blog_posts, 0),
            ('publications', self.publications, 0),
            ('masterclasses', self.masterclasses, 0),
            ('services', self.services, 0),
            ('contacts', self.contacts, 0),
            ('newsletters', self.newsletters, 0),
            ('registrations', self.registrations, 0),
        ]

    async def _guarded(self, key, query, fallback):
        try:
            return await query()
        except Exception:
            logger.exception('Analytics query %r failed, using fallback', key)
            return fallback

    async def collect(self):
        queries = self.queries()
        results = await asyncio.gather(*(self._guarded(key, query, fallback) for key, query, fallback in queries))
        values = dict(zip((key for key, _, _ in queries), results))
        return {
            'days': self.days,
            'totalPageViews': values['totalPageViews'],
            'periodPageViews': values['periodPageViews'],
            'pageViewsByDay': values['pageViewsByDay'],
            'topPages': values['topPages'],
            'viewsByContentType': values['viewsByContentType'],
            'counts': {
                key: values[key]
                for key in ('blogPosts', 'publications', 'masterclasses', 'services',
                            'contacts', 'newsletters', 'registrations')
            },
        }
