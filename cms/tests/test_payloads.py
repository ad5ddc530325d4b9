from django.test import SimpleTestCase, TestCase

from cms.forms import EducationForm, JourneyItemForm, excerpt_from_html
from cms.models import Category
from cms.payloads import EDUCATION_FIELDS, JOURNEY_FIELDS, NO_RENAMES, serialize, to_camel, to_snake


class CaseConversionTests(SimpleTestCase):

    def test_to_snake(self):
        self.assertEqual(to_snake('coverImage'), 'cover_image')
        self.assertEqual(to_snake('isActive'), 'is_active')
        self.assertEqual(to_snake('title'), 'title')

    def test_to_camel(self):
        self.assertEqual(to_camel('purchase_link'), 'purchaseLink')
        self.assertEqual(to_camel('category_id'), 'categoryId')
        self.assertEqual(to_camel('title'), 'title')


class FieldMapTests(SimpleTestCase):

    def test_journey_renames_both_ways(self):
        self.assertEqual(JOURNEY_FIELDS.stored_name('yearRange'), 'period')
        self.assertEqual(JOURNEY_FIELDS.stored_name('company'), 'organization')
        self.assertEqual(JOURNEY_FIELDS.form_name('period'), 'yearRange')
        self.assertEqual(JOURNEY_FIELDS.form_name('organization'), 'company')
        self.assertEqual(JOURNEY_FIELDS.stored_name('title'), 'title')

    def test_education_renames(self):
        self.assertEqual(EDUCATION_FIELDS.to_storage({'degree': 'MBA', 'isActive': True}),
                         {'qualification': 'MBA', 'is_active': True})
        self.assertEqual(EDUCATION_FIELDS.form_name('qualification'), 'degree')

    def test_no_renames_only_changes_case(self):
        self.assertEqual(NO_RENAMES.to_storage({'coverImage': 'x.png'}), {'cover_image': 'x.png'})

    def test_form_binds_renamed_fields(self):
        form = JourneyItemForm.for_create({'title': 'Director', 'company': 'Kambel', 'yearRange': '2015 - Present'})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data['organization'], 'Kambel')
        self.assertEqual(form.cleaned_data['period'], '2015 - Present')

    def test_errors_reported_under_form_names(self):
        form = EducationForm.for_create({'institution': 'University of Ghana'})
        self.assertFalse(form.is_valid())
        self.assertIn('degree', form.error_payload()['fields'])


class SerializeTests(TestCase):

    def test_camel_case_keys(self):
        category = Category.objects.create(name='Literature')
        data = serialize(category, bookCount=2)
        self.assertEqual(data['name'], 'Literature')
        self.assertTrue(data['isActive'])
        self.assertIn('createdAt', data)
        self.assertEqual(data['bookCount'], 2)


class ExcerptTests(SimpleTestCase):

    def test_strips_markup(self):
        self.assertEqual(excerpt_from_html('<p>Hello <strong>world</strong></p>'), 'Hello world')

    def test_truncates_on_word_boundary(self):
        excerpt = excerpt_from_html('<p>' + 'word ' * 100 + '</p>')
        self.assertTrue(excerpt.endswith('...'))
        self.assertLessEqual(len(excerpt), 163)
        self.assertEqual(set(excerpt[:-3].split(' ')), {'word'})
