from django.test import override_settings

from cms.models import Book, Category

from .base import ApiTestCase


class CategoryApiTests(ApiTestCase):

    def test_create_and_list(self):
        response = self.post_json('/api/categories', {'name': 'Course Books', 'description': 'Course material'})
        self.assertEqual(response.status_code, 201)
        self.assertTrue(response.json()['isActive'])

        Category.objects.create(name='Archive', is_active=False)
        names = [c['name'] for c in self.get_json('/api/categories').json()]
        self.assertEqual(names, ['Course Books'])

        names = [c['name'] for c in self.get_json('/api/categories', {'admin': 'true'}).json()]
        self.assertEqual(names, ['Archive', 'Course Books'])

    def test_book_count(self):
        category = Category.objects.create(name='Literature')
        Book.objects.create(title='One', category=category)
        Book.objects.create(title='Two', category=category)
        [listed] = self.get_json('/api/categories').json()
        self.assertEqual(listed['bookCount'], 2)

    def test_duplicate_name_rejected(self):
        Category.objects.create(name='Literature')
        response = self.post_json('/api/categories', {'name': 'Literature'})
        self.assertEqual(response.status_code, 400)
        self.assertIn('name', response.json()['fields'])

    def test_update_keeps_unsent_fields(self):
        category = Category.objects.create(name='Literature', description='Literary works')
        response = self.put_json(f'/api/categories/{category.pk}', {'name': 'Fiction'})
        self.assertEqual(response.status_code, 200)
        category.refresh_from_db()
        self.assertEqual(category.name, 'Fiction')
        self.assertEqual(category.description, 'Literary works')

    def test_delete_unknown(self):
        self.assertEqual(self.delete_json('/api/categories/999').status_code, 404)

    def test_deleting_category_uncategorizes_books(self):
        category_id = self.post_json('/api/categories', {'name': 'X'}).json()['id']
        book_id = self.post_json('/api/publications', {'title': 'Y', 'categoryId': category_id}).json()['id']

        response = self.delete_json(f'/api/categories/{category_id}')
        self.assertEqual(response.status_code, 200)

        [listed] = self.get_json('/api/publications').json()
        self.assertEqual(listed['id'], book_id)
        self.assertIsNone(listed['category'])
        self.assertIsNone(listed['categoryId'])
        self.assertEqual(self.get_json('/api/publications', {'category': 'uncategorized'}).json()[0]['id'], book_id)


class PublicationApiTests(ApiTestCase):

    def setUp(self):
        self.category = Category.objects.create(name='Guidance Books')

    def test_create_with_defaults(self):
        response = self.post_json('/api/publications', {'title': 'Career Compass', 'categoryId': self.category.pk})
        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data['author'], 'Moses Agbesi Katamani')
        self.assertEqual(data['pages'], 0)
        self.assertEqual(data['price'], 0)
        self.assertTrue(data['isActive'])
        self.assertEqual(data['category']['name'], 'Guidance Books')

    @override_settings(SITE_OWNER_NAME='Jane Doe')
    def test_author_default_follows_setting(self):
        data = self.post_json('/api/publications', {'title': 'Career Compass'}).json()
        self.assertEqual(data['author'], 'Jane Doe')

    def test_title_required(self):
        response = self.post_json('/api/publications', {'author': 'Someone'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Validation failed')
        self.assertIn('title', response.json()['fields'])

    def test_unknown_category_reported_under_form_name(self):
        response = self.post_json('/api/publications', {'title': 'Book', 'categoryId': 999})
        self.assertEqual(response.status_code, 400)
        self.assertIn('categoryId', response.json()['fields'])

    def test_list_newest_first_and_category_filter(self):
        other = Category.objects.create(name='Literature')
        first = Book.objects.create(title='First', category=self.category)
        second = Book.objects.create(title='Second', category=other)
        Book.objects.create(title='Hidden', is_active=False)

        titles = [b['title'] for b in self.get_json('/api/publications').json()]
        self.assertEqual(titles, ['Second', 'First'])

        filtered = self.get_json('/api/publications', {'category': self.category.pk}).json()
        self.assertEqual([b['id'] for b in filtered], [first.pk])
        filtered = self.get_json('/api/publications', {'category': other.pk}).json()
        self.assertEqual([b['id'] for b in filtered], [second.pk])
        self.assertEqual(self.get_json('/api/publications', {'category': 'nope'}).json(), [])

    def test_soft_delete_then_update_resurrects(self):
        book = Book.objects.create(title='Career Compass', description='Original', pages=120)

        response = self.delete_json(f'/api/publications/{book.pk}')
        self.assertEqual(response.json(), {'message': 'Publication deleted successfully'})
        self.assertTrue(Book.objects.filter(pk=book.pk).exists())

        detail = self.get_json(f'/api/publications/{book.pk}').json()
        self.assertFalse(detail['isActive'])
        self.assertEqual(self.get_json('/api/publications').json(), [])

        response = self.put_json(f'/api/publications/{book.pk}', {'price': 25})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data['isActive'])
        self.assertEqual(data['price'], 25)
        self.assertEqual(data['description'], 'Original')
        self.assertEqual(data['pages'], 120)

    def test_missing_publication(self):
        response = self.get_json('/api/publications/999')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Publication not found'})
        self.assertEqual(self.put_json('/api/publications/999', {'title': 'x'}).status_code, 404)
