import logging

from django.conf import settings
from django.db import transaction
from django.db.models import Count, Prefetch
from django.http import JsonResponse

from .analytics import StatsAggregator, clamp_days
from .forms import (
    AboutConfigForm, AchievementForm, BlogPostForm, CategoryForm, ContactForm, EducationForm,
    FeatureForm, GalleryItemForm, HeroConfigForm, JourneyItemForm, MasterclassForm, NewsletterForm,
    PageViewForm, PublicationForm, RegistrationForm, ServiceForm, SiteConfigForm,
    SpeakingEngagementForm,
)
from .http import PayloadError, api_endpoint, get_or_404, read_json, require_id, save_valid
from .models import (
    AboutConfig, Achievement, BlogPost, Book, Category, ConsultancyService, ContactMessage,
    EducationQualification, GalleryItem, HeroConfig, JourneyItem, Masterclass,
    MasterclassRegistration, NewsletterSubscription, ServiceFeature, SiteConfig, SocialMediaLink,
    SpeakingEngagement,
)
from .payloads import serialize
from .session import check_credentials, is_admin, login_admin, logout_admin
from .uploads import UploadError, upload_image

logger = logging.getLogger(__name__)


def flag(request, name):
    return request.GET.get(name) == 'true'


def json_list(items):
    return JsonResponse(items, safe=False)


def client_ip(request):
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.META.get('HTTP_X_REAL_IP') or request.META.get('REMOTE_ADDR')


# Publications and categories

def publication_json(book):
    return serialize(book, category=serialize(book.category) if book.category else None)


@api_endpoint('GET', 'POST', errors={'GET': 'Failed to fetch publications', 'POST': 'Failed to create publication'})
def publications(request):
    if request.method == 'POST':
        book = save_valid(PublicationForm.for_create(read_json(request)))
        logger.info('Created publication %s', book.pk)
        return JsonResponse(publication_json(book), status=201)

    books = Book.objects.filter(is_active=True).select_related('category').order_by('-created_at', '-id')
    category = request.GET.get('category')
    if category == 'uncategorized':
        books = books.filter(category__isnull=True)
    elif category:
        if not category.isdigit():
            return json_list([])
        books = books.filter(category_id=int(category))
    return json_list([publication_json(book) for book in books])


@api_endpoint('GET', 'PUT', 'DELETE', errors={
    'GET': 'Failed to fetch publication',
    'PUT': 'Failed to update publication',
    'DELETE': 'Failed to delete publication',
})
def publication_detail(request, pk):
    # Soft-deleted publications stay reachable here so the admin can restore them.
    book = get_or_404(Book.objects.select_related('category'), 'Publication not found', pk=pk)
    if request.method == 'PUT':
        book = save_valid(PublicationForm.for_update(book, read_json(request)))
        return JsonResponse(publication_json(book))
    if request.method == 'DELETE':
        book.soft_delete()
        logger.info('Deactivated publication %s', book.pk)
        return JsonResponse({'message': 'Publication deleted successfully'})
    return JsonResponse(publication_json(book))


@api_endpoint('GET', 'POST', errors={'GET': 'Failed to fetch categories', 'POST': 'Failed to create category'})
def categories(request):
    if request.method == 'POST':
        category = save_valid(CategoryForm.for_create(read_json(request)))
        return JsonResponse(serialize(category), status=201)

    queryset = Category.objects.annotate(book_count=Count('books')).order_by('name')
    if not flag(request, 'admin'):
        queryset = queryset.filter(is_active=True)
    return json_list([serialize(category, bookCount=category.book_count) for category in queryset])


@api_endpoint('GET', 'PUT', 'DELETE', errors={
    'GET': 'Failed to fetch category',
    'PUT': 'Failed to update category',
    'DELETE': 'Failed to delete category',
})
def category_detail(request, pk):
    category = get_or_404(Category, 'Category not found', pk=pk)
    if request.method == 'PUT':
        category = save_valid(CategoryForm.for_update(category, read_json(request)))
    elif request.method == 'DELETE':
        # Books keep existing and become uncategorized.
        category.delete()
        logger.info('Deleted category %s', pk)
        return JsonResponse({'message': 'Category deleted successfully'})
    return JsonResponse(serialize(category, bookCount=category.books.count()))


# Consultancy services

def service_json(service):
    return serialize(service, features=[serialize(feature) for feature in service.visible_features])


@api_endpoint('GET', 'POST', 'PUT', 'DELETE', errors={
    'GET': 'Failed to fetch services',
    'POST': 'Failed to create service',
    'PUT': 'Failed to update service',
    'DELETE': 'Failed to delete service',
})
def consultancy(request):
    if request.method == 'GET':
        features = ServiceFeature.objects.order_by('order', '-created_at', '-id')
        services = ConsultancyService.objects.order_by('order', '-created_at', '-id')
        # ``id`` is what older admin screens send to ask for everything.
        if not (flag(request, 'admin') or request.GET.get('id')):
            features = features.filter(is_active=True)
            services = services.filter(is_active=True)
            if request.GET.get('type'):
                services = services.filter(service_type=request.GET['type'])
        services = services.prefetch_related(Prefetch('features', queryset=features, to_attr='visible_features'))
        return json_list([service_json(service) for service in services])

    payload = read_json(request)
    if request.method == 'POST':
        service = save_valid(ServiceForm.for_create(payload))
        return JsonResponse(serialize(service), status=201)

    service = get_or_404(ConsultancyService, 'Service not found', pk=require_id(payload, 'Service ID is required'))
    if request.method == 'PUT':
        service = save_valid(ServiceForm.for_update(service, payload))
        return JsonResponse(serialize(service))

    service_id = service.pk
    removed = service.delete_with_features()
    logger.info('Deleted service %s and %s features', service_id, removed)
    return JsonResponse({'message': 'Service deleted successfully'})


@api_endpoint('POST', 'PUT', 'DELETE', errors={
    'POST': 'Failed to create feature',
    'PUT': 'Failed to update feature',
    'DELETE': 'Failed to delete feature',
})
def consultancy_features(request):
    payload = read_json(request)
    if request.method == 'POST':
        feature = save_valid(FeatureForm.for_create(payload))
        return JsonResponse(serialize(feature), status=201)

    feature = get_or_404(ServiceFeature, 'Feature not found', pk=require_id(payload, 'Feature ID is required'))
    if request.method == 'PUT':
        feature = save_valid(FeatureForm.for_update(feature, payload))
        return JsonResponse(serialize(feature))

    feature.delete()
    return JsonResponse({'success': True})


# Blog

@api_endpoint('GET', 'POST', 'PUT', 'DELETE', errors={
    'GET': 'Failed to fetch blog posts',
    'POST': 'Failed to create blog post',
    'PUT': 'Failed to update blog post',
    'DELETE': 'Failed to delete blog post',
})
def blog(request):
    if request.method == 'GET':
        posts = BlogPost.objects.all() if flag(request, 'admin') else BlogPost.objects.filter(is_published=True)
        post_id = request.GET.get('id')
        if post_id:
            return JsonResponse(serialize(get_or_404(posts, 'Blog post not found', pk=post_id)))
        return json_list([serialize(post) for post in posts.order_by('-created_at', '-id')])

    payload = read_json(request)
    if request.method == 'POST':
        post = save_valid(BlogPostForm.for_create(payload))
        logger.info('Created blog post %s (published=%s)', post.pk, post.is_published)
        return JsonResponse(serialize(post), status=201)

    post = get_or_404(BlogPost, 'Blog post not found', pk=require_id(payload, 'Blog post ID is required'))
    if request.method == 'PUT':
        post = save_valid(BlogPostForm.for_update(post, payload))
        return JsonResponse(serialize(post))

    post.delete()
    return JsonResponse({'message': 'Blog post deleted successfully'})


# Masterclasses

def masterclass_json(masterclass, **extra):
    return serialize(masterclass, youtubeId=masterclass.youtube_id, embedUrl=masterclass.embed_url, **extra)


@api_endpoint('GET', 'POST', 'PUT', 'DELETE', errors={
    'GET': 'Failed to fetch masterclasses',
    'POST': 'Failed to create masterclass',
    'PUT': 'Failed to update masterclass',
    'DELETE': 'Failed to delete masterclass',
})
def masterclasses(request):
    if request.method == 'GET':
        queryset = Masterclass.objects.annotate(registration_count=Count('registrations'))
        if flag(request, 'admin') or request.GET.get('id'):
            queryset = queryset.order_by('-date', '-id')
        else:
            queryset = queryset.filter(is_active=True).order_by('date', 'id')
        return json_list([masterclass_json(m, registrationCount=m.registration_count) for m in queryset])

    payload = read_json(request)
    if request.method == 'POST':
        masterclass = save_valid(MasterclassForm.for_create(payload))
        logger.info('Created masterclass %s with %s seats', masterclass.pk, masterclass.seats_available)
        return JsonResponse(masterclass_json(masterclass), status=201)

    masterclass = get_or_404(Masterclass, 'Masterclass not found', pk=require_id(payload, 'Masterclass ID is required'))
    if request.method == 'PUT':
        masterclass = save_valid(MasterclassForm.for_update(masterclass, payload))
        return JsonResponse(masterclass_json(masterclass))

    masterclass_id = masterclass.pk
    removed = masterclass.delete_with_registrations()
    logger.info('Deleted masterclass %s and %s registrations', masterclass_id, removed)
    return JsonResponse({'message': 'Masterclass deleted successfully'})


@api_endpoint('POST', errors={'POST': 'Failed to register'})
def masterclass_register(request):
    payload = read_json(request)
    masterclass = None
    if payload.get('masterclassId') not in (None, ''):
        masterclass = get_or_404(Masterclass, 'Masterclass not found', pk=payload['masterclassId'])
        if masterclass.seats_available <= 0 and settings.MASTERCLASS_REJECT_WHEN_FULL:
            return JsonResponse({'error': 'This masterclass is fully booked'}, status=409)
        if not payload.get('masterclassTitle'):
            payload['masterclassTitle'] = masterclass.title

    registration = save_valid(RegistrationForm.for_create(payload))
    logger.info('Registration %s created for masterclass %s', registration.pk, registration.masterclass_id)

    # The registration stands even if the follow-up writes fail.
    if registration.subscribe_newsletter:
        try:
            NewsletterSubscription.objects.subscribe(registration.email)
        except Exception:
            logger.exception('Could not subscribe %s to the newsletter', registration.email)
    if masterclass is not None:
        try:
            masterclass.take_seat()
        except Exception:
            logger.exception('Could not update seats for masterclass %s', masterclass.pk)

    return JsonResponse({'message': 'Registration successful', 'id': registration.pk}, status=201)


def registration_json(registration):
    masterclass = registration.masterclass
    nested = {'title': masterclass.title, 'date': masterclass.date} if masterclass else None
    return serialize(registration, masterclass=nested)


@api_endpoint('GET', 'DELETE', errors={'GET': 'Failed to fetch registrations', 'DELETE': 'Failed to delete registration'})
def masterclass_registrations(request):
    if request.method == 'DELETE':
        payload = read_json(request)
        registration = get_or_404(MasterclassRegistration, 'Registration not found',
                                  pk=require_id(payload, 'Registration ID is required'))
        registration.delete()
        return JsonResponse({'message': 'Registration deleted successfully'})

    registrations = MasterclassRegistration.objects.select_related('masterclass').order_by('-created_at', '-id')
    masterclass_id = request.GET.get('masterclassId')
    if masterclass_id:
        if not masterclass_id.isdigit():
            return json_list([])
        registrations = registrations.filter(masterclass_id=int(masterclass_id))
    return json_list([registration_json(registration) for registration in registrations])


# Gallery

def gallery_json(item):
    return serialize(item, youtubeId=item.youtube_id, embedUrl=item.embed_url, thumbnailUrl=item.thumbnail_url)


@api_endpoint('GET', 'POST', 'PUT', 'DELETE', errors={
    'GET': 'Failed to fetch gallery items',
    'POST': 'Failed to create gallery item',
    'PUT': 'Failed to update gallery item',
    'DELETE': 'Failed to delete gallery item',
})
def gallery(request):
    if request.method == 'GET':
        item_id = request.GET.get('id')
        if item_id:
            return JsonResponse(gallery_json(get_or_404(GalleryItem, 'Gallery item not found', pk=item_id)))
        items = GalleryItem.objects.filter(is_active=True)
        if flag(request, 'featured'):
            items = items.filter(is_featured=True)
        return json_list([gallery_json(item) for item in items.order_by('order', '-created_at', '-id')])

    payload = read_json(request)
    if request.method == 'POST':
        item = save_valid(GalleryItemForm.for_create(payload))
        return JsonResponse(gallery_json(item), status=201)

    item = get_or_404(GalleryItem, 'Gallery item not found', pk=require_id(payload, 'Gallery item ID is required'))
    if request.method == 'PUT':
        item = save_valid(GalleryItemForm.for_update(item, payload))
        return JsonResponse(gallery_json(item))

    item.delete()
    return JsonResponse({'message': 'Gallery item deleted successfully'})


# Site configuration

@api_endpoint('GET', 'PUT', errors={'GET': 'Failed to fetch site config', 'PUT': 'Failed to update site config'})
def site_config(request):
    if request.method == 'GET':
        return JsonResponse(serialize(SiteConfig.objects.get_or_create_default()))

    payload = read_json(request)
    config = SiteConfig.objects.current()
    if config is None:
        return JsonResponse({'error': 'Site config not found'}, status=404)
    config = save_valid(SiteConfigForm.for_update(config, payload))
    logger.info('Updated site config %s', config.pk)
    return JsonResponse(serialize(config))


@api_endpoint('GET', 'PUT', errors={'GET': 'Failed to fetch hero config', 'PUT': 'Failed to update hero config'})
def site_hero(request):
    if request.method == 'GET':
        return JsonResponse(serialize(HeroConfig.objects.active_or_create()))

    payload = read_json(request)
    hero = save_valid(HeroConfigForm.for_update(HeroConfig.objects.active_or_create(), payload))
    logger.info('Updated hero config %s', hero.pk)
    return JsonResponse(serialize(hero))


@api_endpoint('GET', 'POST', 'PUT', errors={
    'GET': 'Failed to fetch about config',
    'POST': 'Failed to create about config',
    'PUT': 'Failed to update about config',
})
def site_about(request):
    if request.method == 'GET':
        config = AboutConfig.objects.current(include_inactive=flag(request, 'admin'))
        return JsonResponse(serialize(config) if config else None, safe=False)

    payload = read_json(request)
    if request.method == 'POST':
        form = AboutConfigForm.for_create(payload)
        status = 201
    else:
        config = get_or_404(AboutConfig, 'About config not found', pk=require_id(payload, 'About config ID is required'))
        form = AboutConfigForm.for_update(config, payload)
        status = 200
    with transaction.atomic():
        config = save_valid(form)
        if config.is_active:
            config.activate()
    if config.is_active:
        logger.info('About config %s is now the active one', config.pk)
    return JsonResponse(serialize(config), status=status)


def about_collection_view(model, form_class, noun):
    """Build the list/create/update/delete endpoint for one About page collection."""

    @api_endpoint('GET', 'POST', 'PUT', 'DELETE', errors={
        'GET': f'Failed to fetch {noun}s',
        'POST': f'Failed to create {noun}',
        'PUT': f'Failed to update {noun}',
        'DELETE': f'Failed to delete {noun}',
    })
    def view(request):
        not_found = f'{noun.capitalize()} not found'
        if request.method == 'GET':
            config = AboutConfig.objects.active_or_create()
            items = model.objects.filter(about_config=config).order_by('order', 'id')
            return json_list([serialize(item) for item in items])

        if request.method == 'DELETE':
            item_id = request.GET.get('id')
            if not item_id:
                raise PayloadError('ID required')
            get_or_404(model, not_found, pk=item_id).delete()
            return JsonResponse({'success': True})

        payload = read_json(request)
        if request.method == 'POST':
            item = save_valid(form_class.for_create(payload), commit=False)
            item.about_config = AboutConfig.objects.active_or_create()
            item.save()
            return JsonResponse(serialize(item), status=201)

        item = get_or_404(model, not_found, pk=require_id(payload, 'ID required'))
        item = save_valid(form_class.for_update(item, payload))
        return JsonResponse(serialize(item))

    view.__name__ = f'about_{model._meta.model_name}'
    return view


about_journey = about_collection_view(JourneyItem, JourneyItemForm, 'journey item')
about_education = about_collection_view(EducationQualification, EducationForm, 'education item')
about_achievements = about_collection_view(Achievement, AchievementForm, 'achievement')
about_speaking = about_collection_view(SpeakingEngagement, SpeakingEngagementForm, 'speaking engagement')


@api_endpoint('GET', errors={'GET': 'Failed to fetch social media links'})
def social_media(request):
    links = SocialMediaLink.objects.filter(is_active=True).order_by('order', 'id')
    return json_list([serialize(link) for link in links])


# Public submissions

@api_endpoint('GET', 'POST', errors={'GET': 'Failed to fetch messages', 'POST': 'Failed to send message'})
def contact(request):
    if request.method == 'POST':
        message = save_valid(ContactForm.for_create(read_json(request)))
        logger.info('Contact message %s received', message.pk)
        return JsonResponse({'message': 'Message sent successfully', 'id': message.pk}, status=201)

    messages = ContactMessage.objects.order_by('-created_at', '-id')
    return json_list([serialize(message) for message in messages])


@api_endpoint('GET', 'POST', 'DELETE', errors={
    'GET': 'Failed to fetch subscribers',
    'POST': 'Failed to subscribe',
    'DELETE': 'Failed to unsubscribe',
})
def newsletter(request):
    if request.method == 'GET':
        subscribers = NewsletterSubscription.objects.order_by('-subscribed_at', '-id')
        return json_list([serialize(subscriber) for subscriber in subscribers])

    form = NewsletterForm(data=read_json(request))
    if not form.is_valid():
        payload = form.error_payload()
        raise PayloadError(payload['error'], payload)
    email = form.cleaned_data['email']

    if request.method == 'DELETE':
        subscription = get_or_404(NewsletterSubscription, 'Subscription not found', email=email)
        subscription.is_active = False
        subscription.save(update_fields=['is_active'])
        logger.info('Newsletter subscription %s deactivated', subscription.pk)
        return JsonResponse({'message': 'Unsubscribed successfully'})

    subscription, status = NewsletterSubscription.objects.subscribe(email)
    if status == NewsletterSubscription.objects.ALREADY_SUBSCRIBED:
        return JsonResponse({'message': 'Email already subscribed'})
    if status == NewsletterSubscription.objects.REACTIVATED:
        logger.info('Newsletter subscription %s reactivated', subscription.pk)
        return JsonResponse({'message': 'Subscription reactivated successfully'})
    logger.info('Newsletter subscription %s created', subscription.pk)
    return JsonResponse({'message': 'Successfully subscribed to newsletter'}, status=201)


# Analytics

@api_endpoint('POST', errors={'POST': 'Failed to track page view'})
def analytics_track(request):
    page_view = save_valid(PageViewForm.for_create(read_json(request)), commit=False)
    page_view.user_agent = request.META.get('HTTP_USER_AGENT') or None
    page_view.ip_address = client_ip(request)
    page_view.save()
    return JsonResponse({'success': True}, status=201)


@api_endpoint('GET', errors={'GET': 'Failed to fetch analytics'})
async def analytics_stats(request):
    days = clamp_days(request.GET.get('days'))
    return JsonResponse(await StatsAggregator(days).collect())


# Media upload

@api_endpoint('POST', errors={'POST': 'Failed to upload file'})
def upload(request):
    try:
        result = upload_image(request.FILES.get('file'), request.POST.get('folder'))
    except UploadError as exc:
        return JsonResponse({'error': str(exc)}, status=exc.status)
    return JsonResponse({
        'message': 'File uploaded successfully',
        'url': result['url'],
        'publicId': result['public_id'],
        'filename': result['filename'],
    })


# Admin session

@api_endpoint('POST', errors={'POST': 'Login failed'})
def admin_login(request):
    payload = read_json(request)
    if not check_credentials(payload.get('username'), payload.get('password')):
        logger.warning('Rejected admin login for %r', payload.get('username'))
        return JsonResponse({'success': False, 'message': 'Invalid credentials'}, status=401)
    login_admin(request)
    return JsonResponse({'success': True})


@api_endpoint('POST', errors={'POST': 'Logout failed'})
def admin_logout(request):
    logout_admin(request)
    return JsonResponse({'success': True})


@api_endpoint('GET')
def admin_check_session(request):
    if is_admin(request):
        return JsonResponse({'authenticated': True})
    return JsonResponse({'authenticated': False}, status=401)
