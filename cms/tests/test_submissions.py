from cms.models import ContactMessage, NewsletterSubscription

from .base import ApiTestCase


class ContactApiTests(ApiTestCase):

    def test_send_message(self):
        response = self.post_json('/api/contact', {
            'name': 'Kofi',
            'email': 'kofi@example.com',
            'message': 'I would like to book a session.',
        })
        self.assertEqual(response.status_code, 201)
        message = ContactMessage.objects.get()
        self.assertEqual(response.json(), {'message': 'Message sent successfully', 'id': message.pk})
        self.assertEqual(message.subject, '')
        self.assertFalse(message.is_read)

    def test_required_fields(self):
        response = self.post_json('/api/contact', {'name': 'Kofi', 'email': 'kofi@example.com'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Name, email, and message are required')
        self.assertFalse(ContactMessage.objects.exists())

    def test_list_newest_first(self):
        older = ContactMessage.objects.create(name='A', email='a@example.com', message='first')
        newer = ContactMessage.objects.create(name='B', email='b@example.com', message='second')
        ids = [m['id'] for m in self.get_json('/api/contact').json()]
        self.assertEqual(ids, [newer.pk, older.pk])


class NewsletterApiTests(ApiTestCase):

    def test_subscribe_twice(self):
        first = self.post_json('/api/newsletter', {'email': 'a@b.com'})
        self.assertEqual(first.status_code, 201)
        self.assertEqual(first.json(), {'message': 'Successfully subscribed to newsletter'})

        second = self.post_json('/api/newsletter', {'email': 'a@b.com'})
        self.assertEqual(second.status_code, 200)
        self.assertEqual(second.json(), {'message': 'Email already subscribed'})
        self.assertEqual(NewsletterSubscription.objects.filter(email='a@b.com').count(), 1)

    def test_resubscribe_reactivates(self):
        NewsletterSubscription.objects.create(email='a@b.com', is_active=False)
        response = self.post_json('/api/newsletter', {'email': 'a@b.com'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'message': 'Subscription reactivated successfully'})
        subscription = NewsletterSubscription.objects.get()
        self.assertTrue(subscription.is_active)

    def test_email_required(self):
        for payload in ({}, {'email': ''}, {'email': 'not-an-email'}):
            with self.subTest(payload=payload):
                response = self.post_json('/api/newsletter', payload)
                self.assertEqual(response.status_code, 400)
                self.assertIn('email', response.json()['fields'])
        self.assertFalse(NewsletterSubscription.objects.exists())

    def test_unsubscribe(self):
        NewsletterSubscription.objects.create(email='a@b.com')
        response = self.delete_json('/api/newsletter', {'email': 'a@b.com'})
        self.assertEqual(response.status_code, 200)
        self.assertFalse(NewsletterSubscription.objects.get().is_active)
        self.assertEqual(self.delete_json('/api/newsletter', {'email': 'x@y.com'}).status_code, 404)

    def test_list_subscribers(self):
        NewsletterSubscription.objects.create(email='a@b.com')
        NewsletterSubscription.objects.create(email='c@d.com', is_active=False)
        emails = [s['email'] for s in self.get_json('/api/newsletter').json()]
        self.assertEqual(emails, ['c@d.com', 'a@b.com'])


class NewsletterManagerTests(ApiTestCase):

    def test_subscribe_statuses(self):
        manager = NewsletterSubscription.objects
        _, status = manager.subscribe('a@b.com')
        self.assertEqual(status, manager.CREATED)
        _, status = manager.subscribe('a@b.com')
        self.assertEqual(status, manager.ALREADY_SUBSCRIBED)
        manager.filter(email='a@b.com').update(is_active=False)
        _, status = manager.subscribe('a@b.com')
        self.assertEqual(status, manager.REACTIVATED)
        self.assertEqual(manager.count(), 1)
