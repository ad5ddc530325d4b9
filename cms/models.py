import logging

from ckeditor.fields import RichTextField
from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.db import models, transaction
from django.db.models import F

from .youtube import youtube_embed_url, youtube_thumbnail_url, youtube_video_id

logger = logging.getLogger(__name__)

SERVICE_TYPE_CHOICES = [
    ('career', 'Career Development'),
    ('business', 'Business Consulting'),
    ('personal', 'Personal Development'),
    ('education', 'Education'),
]

MEDIA_TYPE_CHOICES = [
    ('image', 'Image'),
    ('video', 'Video'),
]


class AdminUser(models.Model):
    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField(unique=True)
    password_hash = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'

    def __str__(self):
        return self.username

    def set_password(self, raw_password):
        self.password_hash = make_password(raw_password)

    def check_password(self, raw_password):
        return check_password(raw_password, self.password_hash)


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'categories'
        ordering = ['name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name


class Book(models.Model):
    """A publication. Never hard-deleted: removing one only deactivates it."""
    title = models.CharField(max_length=255)
    author = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    pages = models.PositiveIntegerField(default=0)
    price = models.FloatField(default=0)
    cover_image = models.CharField(max_length=500, blank=True)
    purchase_link = models.CharField(max_length=500, blank=True)
    category = models.ForeignKey(Category, on_delete=models.SET_NULL, null=True, blank=True, related_name='books')
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'books'

    def __str__(self):
        return self.title

    def soft_delete(self):
        self.is_active = False
        self.save(update_fields=['is_active', 'updated_at'])


class ConsultancyService(models.Model):
    name = models.CharField(max_length=200)
    service_type = models.CharField(max_length=20, choices=SERVICE_TYPE_CHOICES)
    description = models.TextField(blank=True)
    cover_image = models.CharField(max_length=500, blank=True)
    icon = models.CharField(max_length=100, default='fas fa-briefcase')
    order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'consultancy_services'

    def __str__(self):
        return self.name

    def delete_with_features(self):
        # Features are protected by the FK, so they have to go first.
        removed, _ = self.features.all().delete()
        self.delete()
        return removed


class ServiceFeature(models.Model):
    service = models.ForeignKey(ConsultancyService, on_delete=models.PROTECT, related_name='features')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    icon = models.CharField(max_length=100, default='fas fa-check')
    order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'service_features'

    def __str__(self):
        return self.title


class BlogPost(models.Model):
    title = models.CharField(max_length=255)
    content = RichTextField()
    excerpt = models.TextField(blank=True)
    author = models.CharField(max_length=255, blank=True)
    cover_image = models.CharField(max_length=500, blank=True)
    is_published = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'blog_posts'

    def __str__(self):
        return self.title


class Masterclass(models.Model):
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    instructor = models.CharField(max_length=255, blank=True)
    date = models.DateTimeField()
    duration = models.CharField(max_length=100, blank=True)
    price = models.FloatField(default=0)
    total_seats = models.IntegerField(default=30)
    seats_available = models.IntegerField(default=30)
    cover_image = models.CharField(max_length=500, blank=True)
    video_url = models.CharField(max_length=500, blank=True)
    is_upcoming = models.BooleanField(default=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'masterclasses'

    def __str__(self):
        return self.title

    @property
    def youtube_id(self):
        return youtube_video_id(self.video_url)

    @property
    def embed_url(self):
        return youtube_embed_url(self.youtube_id) if self.youtube_id else None

    def take_seat(self):
        """Decrement the seat counter by one in a single UPDATE. Nothing stops it going below zero."""
        Masterclass.objects.filter(pk=self.pk).update(seats_available=F('seats_available') - 1)
        self.refresh_from_db(fields=['seats_available'])
        if self.seats_available < 0:
            logger.warning('Masterclass %s is overbooked (seats_available=%s)', self.pk, self.seats_available)
        return self.seats_available

    def delete_with_registrations(self):
        removed, _ = self.registrations.all().delete()
        self.delete()
        return removed


class MasterclassRegistration(models.Model):
    masterclass = models.ForeignKey(Masterclass, on_delete=models.PROTECT, null=True, blank=True, related_name='registrations')
    masterclass_title = models.CharField(max_length=255, blank=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=50)
    company = models.CharField(max_length=200, blank=True)
    experience_years = models.CharField(max_length=50, blank=True)
    motivation = models.TextField(blank=True)
    subscribe_newsletter = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'masterclass_registrations'

    def __str__(self):
        return f'{self.first_name} {self.last_name} - {self.masterclass_title}'


class GalleryItem(models.Model):
    title = models.CharField(max_length=255)
    caption = models.CharField(max_length=500, blank=True)
    description = models.TextField(blank=True)
    media_type = models.CharField(max_length=10, choices=MEDIA_TYPE_CHOICES, default='image')
    image = models.CharField(max_length=500, blank=True)
    video_url = models.CharField(max_length=500, blank=True)
    video_file = models.CharField(max_length=500, blank=True)
    thumbnail = models.CharField(max_length=500, blank=True)
    order = models.IntegerField(default=0)
    is_featured = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'gallery_items'

    def __str__(self):
        return self.title

    @property
    def youtube_id(self):
        if self.media_type != 'video':
            return None
        return youtube_video_id(self.video_url)

    @property
    def embed_url(self):
        return youtube_embed_url(self.youtube_id) if self.youtube_id else None

    @property
    def thumbnail_url(self):
        if self.thumbnail:
            return self.thumbnail
        if self.youtube_id:
            return youtube_thumbnail_url(self.youtube_id)
        return self.image or None


class SiteConfigManager(models.Manager):
    def current(self):
        return self.order_by('id').first()

    def get_or_create_default(self):
        config = self.current()
        if config is None:
            config = self.create(site_name=settings.SITE_NAME, tagline=settings.SITE_TAGLINE)
            logger.info('Created default site config %s', config.pk)
        return config


class SiteConfig(models.Model):
    """Site-wide settings. The first row is canonical."""
    site_name = models.CharField(max_length=200, default='Kambel Consult')
    tagline = models.CharField(max_length=300, blank=True)
    footer_about = models.TextField(blank=True)
    privacy_policy = models.TextField(blank=True)
    terms_conditions = models.TextField(blank=True)
    contact_email = models.CharField(max_length=254, blank=True)
    contact_phone = models.CharField(max_length=50, blank=True)
    address = models.CharField(max_length=300, blank=True)
    location = models.CharField(max_length=300, blank=True)
    facebook_url = models.CharField(max_length=500, blank=True)
    twitter_url = models.CharField(max_length=500, blank=True)
    linkedin_url = models.CharField(max_length=500, blank=True)
    instagram_url = models.CharField(max_length=500, blank=True)
    youtube_url = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SiteConfigManager()

    class Meta:
        db_table = 'site_config'

    def __str__(self):
        return self.site_name


class HeroConfigManager(models.Manager):
    def active(self):
        return self.filter(is_active=True).order_by('id').first()

    def active_or_create(self, **defaults):
        hero = self.active()
        if hero is None:
            values = {
                'hero_title': f'Welcome to {settings.SITE_NAME}',
                'hero_subtitle': 'Your trusted partner in career development',
                'profile_name': settings.SITE_OWNER_NAME,
            }
            values.update(defaults)
            hero = self.create(**values)
            logger.info('Created default hero config %s', hero.pk)
        return hero


class HeroConfig(models.Model):
    hero_title = models.CharField(max_length=300)
    hero_subtitle = models.TextField(blank=True)
    profile_name = models.CharField(max_length=200, blank=True)
    profile_title = models.CharField(max_length=200, default='Chief Executive Officer')
    profile_picture = models.CharField(max_length=500, blank=True)
    years_experience = models.CharField(max_length=50, default='15+')
    years_label = models.CharField(max_length=100, default='Years Experience')
    years_description = models.CharField(max_length=200, default='Professional Development')
    clients_count = models.CharField(max_length=50, default='5000+')
    clients_label = models.CharField(max_length=100, default='Clients')
    clients_description = models.CharField(max_length=200, default='Successfully Helped')
    publications_count = models.CharField(max_length=50, default='50+')
    publications_label = models.CharField(max_length=100, default='Publications')
    publications_description = models.CharField(max_length=200, default='Authored Works')
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = HeroConfigManager()

    class Meta:
        db_table = 'hero_config'

    def __str__(self):
        return self.hero_title


class AboutConfigManager(models.Manager):
    def current(self, include_inactive=False):
        queryset = self.all() if include_inactive else self.filter(is_active=True)
        return queryset.order_by('-created_at', '-id').first()

    def active_or_create(self):
        config = self.current()
        if config is None:
            config = self.create()
            logger.info('Created empty about config %s', config.pk)
        return config


class AboutConfig(models.Model):
    """About page content. At most one row is active at a time."""
    hero_years = models.CharField(max_length=50, blank=True)
    hero_clients = models.CharField(max_length=50, blank=True)
    hero_publications = models.CharField(max_length=50, blank=True)
    hero_speaking = models.CharField(max_length=50, blank=True)
    profile_name = models.CharField(max_length=200, blank=True)
    profile_title = models.CharField(max_length=200, blank=True)
    profile_picture = models.CharField(max_length=500, blank=True)
    bio_summary = models.TextField(blank=True)
    tags = models.TextField(blank=True, help_text='Comma separated')
    philosophy_quote = models.TextField(blank=True)
    cta_title = models.CharField(max_length=200, blank=True)
    cta_description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AboutConfigManager()

    class Meta:
        db_table = 'about_config'

    def __str__(self):
        return self.profile_name or f'About #{self.pk}'

    def activate(self):
        with transaction.atomic():
            AboutConfig.objects.exclude(pk=self.pk).filter(is_active=True).update(is_active=False)
            AboutConfig.objects.filter(pk=self.pk).update(is_active=True)
        self.is_active = True


class AboutChild(models.Model):
    order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class JourneyItem(AboutChild):
    about_config = models.ForeignKey(AboutConfig, on_delete=models.PROTECT, related_name='journey_items')
    title = models.CharField(max_length=200)
    organization = models.CharField(max_length=200, blank=True)
    period = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    icon = models.CharField(max_length=100, default='briefcase')

    class Meta:
        db_table = 'professional_journey_items'

    def __str__(self):
        return self.title


class EducationQualification(AboutChild):
    about_config = models.ForeignKey(AboutConfig, on_delete=models.PROTECT, related_name='education')
    qualification = models.CharField(max_length=200)
    institution = models.CharField(max_length=200, blank=True)
    year = models.CharField(max_length=50, blank=True)
    description = models.TextField(blank=True)
    icon = models.CharField(max_length=100, default='graduation-cap')

    class Meta:
        db_table = 'education_qualifications'

    def __str__(self):
        return self.qualification


class Achievement(AboutChild):
    about_config = models.ForeignKey(AboutConfig, on_delete=models.PROTECT, related_name='achievements')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    year = models.CharField(max_length=50, blank=True)
    icon = models.CharField(max_length=100, default='trophy')

    class Meta:
        db_table = 'achievements'

    def __str__(self):
        return self.title


class SpeakingEngagement(AboutChild):
    about_config = models.ForeignKey(AboutConfig, on_delete=models.PROTECT, related_name='speaking_engagements')
    title = models.CharField(max_length=200)
    event = models.CharField(max_length=200, blank=True)
    date = models.CharField(max_length=100, blank=True)
    location = models.CharField(max_length=200, blank=True)

    class Meta:
        db_table = 'speaking_engagements'

    def __str__(self):
        return self.title


class SocialMediaLink(models.Model):
    platform = models.CharField(max_length=50)
    url = models.CharField(max_length=500)
    icon_class = models.CharField(max_length=100, blank=True)
    order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'social_media_links'

    def __str__(self):
        return self.platform


class ContactMessage(models.Model):
    name = models.CharField(max_length=200)
    email = models.EmailField()
    subject = models.CharField(max_length=300, blank=True)
    message = models.TextField()
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'contact_messages'

    def __str__(self):
        return f'{self.name} <{self.email}>'


class NewsletterManager(models.Manager):
    CREATED = 'created'
    REACTIVATED = 'reactivated'
    ALREADY_SUBSCRIBED = 'already_subscribed'

    def subscribe(self, email):
        """Create or reactivate the single subscription row for ``email``."""
        subscription = self.filter(email=email).first()
        if subscription is None:
            return self.create(email=email), self.CREATED
        if subscription.is_active:
            return subscription, self.ALREADY_SUBSCRIBED
        subscription.is_active = True
        subscription.save(update_fields=['is_active'])
        return subscription, self.REACTIVATED


class NewsletterSubscription(models.Model):
    email = models.EmailField(unique=True)
    is_active = models.BooleanField(default=True)
    subscribed_at = models.DateTimeField(auto_now_add=True)

    objects = NewsletterManager()

    class Meta:
        db_table = 'newsletter_subscriptions'

    def __str__(self):
        return self.email


class PageView(models.Model):
    """Append-only analytics fact row."""
    path = models.CharField(max_length=500)
    title = models.CharField(max_length=500, blank=True, null=True)
    referrer = models.CharField(max_length=1000, blank=True, null=True)
    user_agent = models.TextField(blank=True, null=True)
    ip_address = models.CharField(max_length=100, blank=True, null=True)
    content_type = models.CharField(max_length=50, blank=True, null=True)
    content_id = models.CharField(max_length=100, blank=True, null=True)
    viewed_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'page_views'

    def __str__(self):
        return self.path
