from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from cms.models import (
    AboutConfig, AdminUser, BlogPost, Category, ConsultancyService, HeroConfig, ServiceFeature,
    SiteConfig, SocialMediaLink,
)

CATEGORIES = [
    ('Course Books', 'Educational course materials'),
    ('Guidance Books', 'Personal and professional guidance'),
    ('Inspirational Books', 'Motivational and inspirational content'),
    ('Literature', 'Literary works and publications'),
]

SERVICES = [
    {
        'name': 'Career Development',
        'service_type': 'career',
        'description': 'Professional career guidance and development services to help you achieve your career goals.',
        'icon': 'fas fa-briefcase',
        'order': 1,
        'features': [
            ('Career Assessment', 'Comprehensive career evaluation and planning', 'fas fa-clipboard-check'),
            ('Resume Building', 'Professional resume and portfolio creation', 'fas fa-file-alt'),
            ('Interview Preparation', 'Interview skills training and mock interviews', 'fas fa-handshake'),
        ],
    },
    {
        'name': 'Business Consulting',
        'service_type': 'business',
        'description': 'Strategic business consulting and advisory services for growth and success.',
        'icon': 'fas fa-chart-line',
        'order': 2,
        'features': [
            ('Strategic Planning', 'Business strategy development and execution', 'fas fa-chess'),
            ('Market Analysis', 'Comprehensive market research and competitive analysis', 'fas fa-search'),
            ('Growth Strategy', 'Business growth planning and scaling strategies', 'fas fa-rocket'),
        ],
    },
    {
        'name': 'Personal Development',
        'service_type': 'personal',
        'description': 'Personal growth and development programs to unlock your full potential.',
        'icon': 'fas fa-user-graduate',
        'order': 3,
        'features': [
            ('Goal Setting', 'Personal goal achievement and life planning', 'fas fa-bullseye'),
            ('Time Management', 'Productivity optimization and time management', 'fas fa-clock'),
            ('Leadership Skills', 'Leadership development and soft skills training', 'fas fa-crown'),
        ],
    },
]

BLOG_POSTS = [
    {
        'title': 'Welcome to Kambel Consult',
        'content': '<p>Welcome to our professional consulting and training services. We are committed to helping '
                   'individuals and organizations achieve their goals through expert guidance and support.</p>',
        'excerpt': 'Welcome to our professional consulting and training services.',
        'author': 'Kambel Team',
    },
    {
        'title': 'The Importance of Professional Development',
        'content': '<p>Professional development is crucial for career growth and personal success. In today\'s '
                   'competitive world, continuous learning and skill development are essential.</p>',
        'excerpt': 'Professional development is crucial for career growth.',
        'author': 'Moses Agbesi Katamani',
    },
]

SOCIAL_LINKS = [
    ('facebook', 'https://facebook.com/kambelconsult', 'fab fa-facebook'),
    ('twitter', 'https://twitter.com/kambelconsult', 'fab fa-twitter'),
    ('linkedin', 'https://linkedin.com/company/kambelconsult', 'fab fa-linkedin'),
]


class Command(BaseCommand):
    help = 'Load the starter content for a fresh site. Safe to run more than once.'

    def add_arguments(self, parser):
        parser.add_argument('--admin-username', default='admin')
        parser.add_argument('--admin-email', default='admin@kambelconsult.com')
        parser.add_argument('--admin-password', default=None,
                            help='Defaults to ADMIN_PASSWORD, or admin123 when that is unset.')

    @transaction.atomic
    def handle(self, *args, **options):
        self.seed_admin(options)
        self.seed_categories()
        self.seed_services()
        self.seed_site_config()
        self.seed_blog()
        self.seed_social_links()
        self.stdout.write(self.style.SUCCESS('Site content seeded.'))

    def seed_admin(self, options):
        admin = AdminUser.objects.filter(email=options['admin_email']).first()
        if admin is not None:
            self.stdout.write(f'Admin user {admin.email} already exists')
            return
        password = options['admin_password'] or settings.ADMIN_PASSWORD or 'admin123'
        if password == 'admin123':
            self.stdout.write(self.style.WARNING('Using the default admin password; change it before going live.'))
        admin = AdminUser(username=options['admin_username'], email=options['admin_email'])
        admin.set_password(password)
        admin.save()
        self.stdout.write(f'Created admin user {admin.email}')

    def seed_categories(self):
        created = 0
        for name, description in CATEGORIES:
            _, was_created = Category.objects.get_or_create(name=name, defaults={'description': description})
            created += was_created
        self.stdout.write(f'Categories: {created} created, {len(CATEGORIES) - created} already present')

    def seed_services(self):
        for entry in SERVICES:
            fields = {key: value for key, value in entry.items() if key != 'features'}
            service, created = ConsultancyService.objects.get_or_create(name=fields.pop('name'), defaults=fields)
            if not created:
                continue
            for order, (title, description, icon) in enumerate(entry['features'], start=1):
                ServiceFeature.objects.create(service=service, title=title, description=description, icon=icon, order=order)
            self.stdout.write(f'Created service {service.name} with {len(entry["features"])} features')

    def seed_site_config(self):
        if SiteConfig.objects.current() is None:
            SiteConfig.objects.create(
                site_name=settings.SITE_NAME,
                tagline=settings.SITE_TAGLINE,
                contact_email='info@kambelconsult.com',
                contact_phone='+1 (555) 123-4567',
                address='123 Business Street',
                location='City, State, Country',
            )
            self.stdout.write('Created site configuration')

        if HeroConfig.objects.active() is None:
            HeroConfig.objects.active_or_create(
                hero_subtitle='Your trusted partner in career development and business excellence',
            )
            self.stdout.write('Created hero configuration')

        if AboutConfig.objects.current() is None:
            AboutConfig.objects.create(
                hero_years='15+',
                hero_clients='500+',
                hero_publications='50+',
                hero_speaking='100+',
                profile_name=settings.SITE_OWNER_NAME,
                profile_title='Founder & CEO, Kambel Consult',
                bio_summary='A visionary leader and expert consultant with over 15 years of experience in '
                            'education, career development, and business advisory services.',
                tags='Education Expert,Career Coach,Business Advisor,Author,Speaker',
                philosophy_quote='Education is the foundation of all progress.',
                cta_title='Ready to Work Together?',
                cta_description="Let's discuss how I can help you achieve your goals and unlock your potential.",
            )
            self.stdout.write('Created about configuration')

    def seed_blog(self):
        for post in BLOG_POSTS:
            fields = dict(post, is_published=True)
            _, created = BlogPost.objects.get_or_create(title=fields.pop('title'), defaults=fields)
            if created:
                self.stdout.write(f'Created blog post "{post["title"]}"')

    def seed_social_links(self):
        for order, (platform, url, icon_class) in enumerate(SOCIAL_LINKS, start=1):
            SocialMediaLink.objects.get_or_create(
                platform=platform,
                defaults={'url': url, 'icon_class': icon_class, 'order': order},
            )
