from datetime import timedelta

from django.db.models import ProtectedError
from django.test import TestCase
from django.utils import timezone

from cms.models import (
    AboutConfig, Book, Category, ConsultancyService, JourneyItem, Masterclass, MasterclassRegistration,
    ServiceFeature,
)


class OwnershipRuleTests(TestCase):

    def test_features_protect_their_service(self):
        service = ConsultancyService.objects.create(name='Career', service_type='career')
        ServiceFeature.objects.create(service=service, title='Coaching')
        with self.assertRaises(ProtectedError):
            service.delete()
        self.assertEqual(service.delete_with_features(), 1)
        self.assertFalse(ConsultancyService.objects.exists())

    def test_registrations_protect_their_masterclass(self):
        masterclass = Masterclass.objects.create(title='Leadership', date=timezone.now() + timedelta(days=3))
        MasterclassRegistration.objects.create(masterclass=masterclass, first_name='A', last_name='B',
                                               email='a@b.com', phone='1')
        with self.assertRaises(ProtectedError):
            masterclass.delete()
        self.assertEqual(masterclass.delete_with_registrations(), 1)

    def test_about_children_are_not_cascaded(self):
        config = AboutConfig.objects.create()
        JourneyItem.objects.create(about_config=config, title='CEO')
        with self.assertRaises(ProtectedError):
            config.delete()

    def test_category_removal_keeps_books(self):
        category = Category.objects.create(name='Literature')
        book = Book.objects.create(title='Poems', category=category)
        category.delete()
        book.refresh_from_db()
        self.assertIsNone(book.category)

    def test_soft_delete(self):
        book = Book.objects.create(title='Poems')
        book.soft_delete()
        self.assertFalse(Book.objects.get(pk=book.pk).is_active)


class SeatCounterTests(TestCase):

    def test_take_seat_decrements_by_one(self):
        masterclass = Masterclass.objects.create(title='Leadership', date=timezone.now(), seats_available=2)
        self.assertEqual(masterclass.take_seat(), 1)
        self.assertEqual(masterclass.take_seat(), 0)
        with self.assertLogs('cms.models', level='WARNING'):
            self.assertEqual(masterclass.take_seat(), -1)


class AboutActivationTests(TestCase):

    def test_single_active_config(self):
        first = AboutConfig.objects.create()
        second = AboutConfig.objects.create(is_active=False)
        second.activate()
        first.refresh_from_db()
        second.refresh_from_db()
        self.assertFalse(first.is_active)
        self.assertTrue(second.is_active)
        self.assertEqual(AboutConfig.objects.current(), second)

    def test_active_or_create(self):
        config = AboutConfig.objects.active_or_create()
        self.assertTrue(config.is_active)
        self.assertEqual(AboutConfig.objects.active_or_create(), config)
