from bs4 import BeautifulSoup
from django import forms
from django.conf import settings
from django.core.exceptions import NON_FIELD_ERRORS
from django.forms.models import model_to_dict

from .models import (
    AboutConfig, Achievement, BlogPost, Book, Category, ConsultancyService, ContactMessage,
    EducationQualification, GalleryItem, HeroConfig, JourneyItem, Masterclass,
    MasterclassRegistration, PageView, ServiceFeature, SiteConfig, SpeakingEngagement,
)
from .payloads import EDUCATION_FIELDS, JOURNEY_FIELDS, NO_RENAMES, to_camel

EXCERPT_LENGTH = 160


def excerpt_from_html(html, length=EXCERPT_LENGTH):
    text = ' '.join(BeautifulSoup(html or '', 'html.parser').get_text(' ').split())
    if len(text) <= length:
        return text
    return text[:length].rsplit(' ', 1)[0] + '...'


class PayloadFormMixin:
    """Report validation errors under the names the client sent."""
    field_map = NO_RENAMES
    error_message = 'Validation failed'

    def error_payload(self):
        fields = {}
        for name, errors in self.errors.items():
            if name == NON_FIELD_ERRORS:
                fields[name] = list(errors)
                continue
            key = to_camel(name)
            if isinstance(self.fields.get(name), forms.ModelChoiceField):
                key += 'Id'
            fields[self.field_map.form_name(key)] = list(errors)
        return {'error': self.error_message, 'fields': fields}


class PayloadModelForm(PayloadFormMixin, forms.ModelForm):
    """
    ModelForm bound from a camelCase JSON payload.

    Create: fields that are missing, null or empty take ``create_defaults()``.
    Update: the stored row is the starting point and only the provided
    fields are overwritten, so a partial payload never blanks other columns.
    """
    defaults = {}

    @classmethod
    def storage_payload(cls, payload):
        data = {}
        for key, value in cls.field_map.to_storage(payload).items():
            if key.endswith('_id') and key[:-3] in cls.base_fields:
                key = key[:-3]
            if key in cls.base_fields:
                data[key] = value
        return data

    @classmethod
    def create_defaults(cls, payload):
        return dict(cls.defaults)

    @classmethod
    def for_create(cls, payload):
        data = cls.storage_payload(payload)
        for key, value in cls.create_defaults(payload).items():
            if data.get(key) in (None, ''):
                data[key] = value
        return cls(data=data)

    @classmethod
    def for_update(cls, instance, payload):
        data = model_to_dict(instance, fields=list(cls.base_fields))
        data.update(cls.storage_payload(payload))
        return cls(data=data, instance=instance)


class CategoryForm(PayloadModelForm):
    defaults = {'is_active': True}

    class Meta:
        model = Category
        fields = ['name', 'description', 'is_active']


class PublicationForm(PayloadModelForm):
    defaults = {'pages': 0, 'price': 0}

    class Meta:
        model = Book
        fields = ['title', 'author', 'description', 'pages', 'price', 'cover_image', 'purchase_link', 'category']

    @classmethod
    def create_defaults(cls, payload):
        return {**cls.defaults, 'author': settings.SITE_OWNER_NAME}

    def save(self, commit=True):
        # Saving a publication always (re)activates it, including after a soft delete.
        self.instance.is_active = True
        return super().save(commit=commit)


class ServiceForm(PayloadModelForm):
    defaults = {'icon': 'fas fa-briefcase', 'order': 0, 'is_active': True}

    class Meta:
        model = ConsultancyService
        fields = ['name', 'service_type', 'description', 'cover_image', 'icon', 'order', 'is_active']


class FeatureForm(PayloadModelForm):
    defaults = {'icon': 'fas fa-check', 'order': 0, 'is_active': True}

    class Meta:
        model = ServiceFeature
        fields = ['service', 'title', 'description', 'icon', 'order', 'is_active']


class BlogPostForm(PayloadModelForm):
    defaults = {'is_published': False}

    class Meta:
        model = BlogPost
        fields = ['title', 'content', 'excerpt', 'author', 'cover_image', 'is_published']

    @classmethod
    def create_defaults(cls, payload):
        return {**cls.defaults, 'author': settings.BLOG_DEFAULT_AUTHOR}

    def clean(self):
        cleaned_data = super().clean()
        if not cleaned_data.get('excerpt') and cleaned_data.get('content'):
            cleaned_data['excerpt'] = excerpt_from_html(cleaned_data['content'])
        return cleaned_data


class MasterclassForm(PayloadModelForm):
    defaults = {'price': 0, 'is_upcoming': True, 'is_active': True}

    class Meta:
        model = Masterclass
        fields = [
            'title', 'description', 'instructor', 'date', 'duration', 'price', 'total_seats',
            'seats_available', 'cover_image', 'video_url', 'is_upcoming', 'is_active',
        ]

    @classmethod
    def create_defaults(cls, payload):
        return {**cls.defaults, 'instructor': settings.SITE_OWNER_NAME}

    @classmethod
    def for_create(cls, payload):
        form = super().for_create(payload)
        # Seats fall back the way the admin form expects: explicit value, else the total, else 30.
        total_seats = payload.get('totalSeats') or 30
        form.data['total_seats'] = total_seats
        form.data['seats_available'] = payload.get('seatsAvailable') or total_seats
        return form


class RegistrationForm(PayloadModelForm):
    error_message = 'First name, last name, email, and phone are required'

    class Meta:
        model = MasterclassRegistration
        fields = [
            'masterclass', 'masterclass_title', 'first_name', 'last_name', 'email', 'phone',
            'company', 'experience_years', 'motivation', 'subscribe_newsletter',
        ]


class GalleryItemForm(PayloadModelForm):
    defaults = {'media_type': 'image', 'order': 0, 'is_featured': False, 'is_active': True}

    class Meta:
        model = GalleryItem
        fields = [
            'title', 'caption', 'description', 'media_type', 'image', 'video_url', 'video_file',
            'thumbnail', 'order', 'is_featured', 'is_active',
        ]

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('media_type') == 'video' and not (cleaned_data.get('video_url') or cleaned_data.get('video_file')):
            self.add_error('video_url', 'A video item needs a video URL or an uploaded video file.')
        return cleaned_data


class SiteConfigForm(PayloadModelForm):
    class Meta:
        model = SiteConfig
        fields = [
            'site_name', 'tagline', 'footer_about', 'privacy_policy', 'terms_conditions',
            'contact_email', 'contact_phone', 'address', 'location', 'facebook_url',
            'twitter_url', 'linkedin_url', 'instagram_url', 'youtube_url',
        ]


class HeroConfigForm(PayloadModelForm):
    # Profile and *_description fields are not editable here; they keep their stored values.
    class Meta:
        model = HeroConfig
        fields = [
            'hero_title', 'hero_subtitle', 'years_experience', 'years_label', 'clients_count',
            'clients_label', 'publications_count', 'publications_label',
        ]


class AboutConfigForm(PayloadModelForm):
    defaults = {'is_active': True}

    class Meta:
        model = AboutConfig
        fields = [
            'hero_years', 'hero_clients', 'hero_publications', 'hero_speaking', 'profile_name',
            'profile_title', 'profile_picture', 'bio_summary', 'tags', 'philosophy_quote',
            'cta_title', 'cta_description', 'is_active',
        ]


class JourneyItemForm(PayloadModelForm):
    field_map = JOURNEY_FIELDS
    defaults = {'icon': 'briefcase', 'order': 0, 'is_active': True}

    class Meta:
        model = JourneyItem
        fields = ['title', 'organization', 'period', 'description', 'icon', 'order', 'is_active']


class EducationForm(PayloadModelForm):
    field_map = EDUCATION_FIELDS
    defaults = {'icon': 'graduation-cap', 'order': 0, 'is_active': True}

    class Meta:
        model = EducationQualification
        fields = ['qualification', 'institution', 'year', 'description', 'icon', 'order', 'is_active']


class AchievementForm(PayloadModelForm):
    defaults = {'icon': 'trophy', 'order': 0, 'is_active': True}

    class Meta:
        model = Achievement
        fields = ['title', 'description', 'year', 'icon', 'order', 'is_active']


class SpeakingEngagementForm(PayloadModelForm):
    defaults = {'order': 0, 'is_active': True}

    class Meta:
        model = SpeakingEngagement
        fields = ['title', 'event', 'date', 'location', 'order', 'is_active']


class ContactForm(PayloadModelForm):
    error_message = 'Name, email, and message are required'

    class Meta:
        model = ContactMessage
        fields = ['name', 'email', 'subject', 'message']


class NewsletterForm(PayloadFormMixin, forms.Form):
    error_message = 'A valid email is required'

    email = forms.EmailField()

    def clean_email(self):
        return self.cleaned_data['email'].strip()


class PageViewForm(PayloadModelForm):
    class Meta:
        model = PageView
        fields = ['path', 'title', 'referrer', 'content_type', 'content_id']
