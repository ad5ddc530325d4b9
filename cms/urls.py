from django.urls import path

from . import views

urlpatterns = [
    path('publications', views.publications, name='publications'),
    path('publications/<int:pk>', views.publication_detail, name='publication_detail'),
    path('categories', views.categories, name='categories'),
    path('categories/<int:pk>', views.category_detail, name='category_detail'),
    path('consultancy', views.consultancy, name='consultancy'),
    path('consultancy/features', views.consultancy_features, name='consultancy_features'),
    path('blog', views.blog, name='blog'),
    path('masterclasses', views.masterclasses, name='masterclasses'),
    path('masterclasses/register', views.masterclass_register, name='masterclass_register'),
    path('masterclasses/registrations', views.masterclass_registrations, name='masterclass_registrations'),
    path('gallery', views.gallery, name='gallery'),
    path('site/config', views.site_config, name='site_config'),
    path('site/hero', views.site_hero, name='site_hero'),
    path('site/about', views.site_about, name='site_about'),
    path('site/about/journey', views.about_journey, name='about_journey'),
    path('site/about/education', views.about_education, name='about_education'),
    path('site/about/achievements', views.about_achievements, name='about_achievements'),
    path('site/about/speaking', views.about_speaking, name='about_speaking'),
    path('site/social-media', views.social_media, name='social_media'),
    path('contact', views.contact, name='contact'),
    path('newsletter', views.newsletter, name='newsletter'),
    path('analytics/track', views.analytics_track, name='analytics_track'),
    path('analytics/stats', views.analytics_stats, name='analytics_stats'),
    path('upload', views.upload, name='upload'),
    path('admin/login', views.admin_login, name='admin_login'),
    path('admin/logout', views.admin_logout, name='admin_logout'),
    path('admin/check-session', views.admin_check_session, name='admin_check_session'),
]
