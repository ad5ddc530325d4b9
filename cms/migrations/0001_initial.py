import ckeditor.fields
import django.db.models.deletion
from django.db import migrations, models


def timestamps():
    return [
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


def primary_key():
    return ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID'))


def about_child_fields():
    return [
        primary_key(),
        ('order', models.IntegerField(default=0)),
        ('is_active', models.BooleanField(default=True)),
        *timestamps(),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AdminUser',
            fields=[
                primary_key(),
                ('username', models.CharField(max_length=150, unique=True)),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('password_hash', models.CharField(max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'users'},
        ),
        migrations.CreateModel(
            name='Category',
            fields=[
                primary_key(),
                ('name', models.CharField(max_length=100, unique=True)),
                ('description', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'categories', 'ordering': ['name'], 'verbose_name_plural': 'categories'},
        ),
        migrations.CreateModel(
            name='Book',
            fields=[
                primary_key(),
                ('title', models.CharField(max_length=255)),
                ('author', models.CharField(blank=True, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('pages', models.PositiveIntegerField(default=0)),
                ('price', models.FloatField(default=0)),
                ('cover_image', models.CharField(blank=True, max_length=500)),
                ('purchase_link', models.CharField(blank=True, max_length=500)),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='books', to='cms.category')),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'books'},
        ),
        migrations.CreateModel(
            name='ConsultancyService',
            fields=[
                primary_key(),
                ('name', models.CharField(max_length=200)),
                ('service_type', models.CharField(choices=[('career', 'Career Development'), ('business', 'Business Consulting'), ('personal', 'Personal Development'), ('education', 'Education')], max_length=20)),
                ('description', models.TextField(blank=True)),
                ('cover_image', models.CharField(blank=True, max_length=500)),
                ('icon', models.CharField(default='fas fa-briefcase', max_length=100)),
                ('order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'consultancy_services'},
        ),
        migrations.CreateModel(
            name='ServiceFeature',
            fields=[
                primary_key(),
                ('service', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='features', to='cms.consultancyservice')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('icon', models.CharField(default='fas fa-check', max_length=100)),
                ('order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'service_features'},
        ),
        migrations.CreateModel(
            name='BlogPost',
            fields=[
                primary_key(),
                ('title', models.CharField(max_length=255)),
                ('content', ckeditor.fields.RichTextField()),
                ('excerpt', models.TextField(blank=True)),
                ('author', models.CharField(blank=True, max_length=255)),
                ('cover_image', models.CharField(blank=True, max_length=500)),
                ('is_published', models.BooleanField(default=False)),
                *timestamps(),
            ],
            options={'db_table': 'blog_posts'},
        ),
        migrations.CreateModel(
            name='Masterclass',
            fields=[
                primary_key(),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('instructor', models.CharField(blank=True, max_length=255)),
                ('date', models.DateTimeField()),
                ('duration', models.CharField(blank=True, max_length=100)),
                ('price', models.FloatField(default=0)),
                ('total_seats', models.IntegerField(default=30)),
                ('seats_available', models.IntegerField(default=30)),
                ('cover_image', models.CharField(blank=True, max_length=500)),
                ('video_url', models.CharField(blank=True, max_length=500)),
                ('is_upcoming', models.BooleanField(default=True)),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'masterclasses'},
        ),
        migrations.CreateModel(
            name='MasterclassRegistration',
            fields=[
                primary_key(),
                ('masterclass', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='registrations', to='cms.masterclass')),
                ('masterclass_title', models.CharField(blank=True, max_length=255)),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(max_length=50)),
                ('company', models.CharField(blank=True, max_length=200)),
                ('experience_years', models.CharField(blank=True, max_length=50)),
                ('motivation', models.TextField(blank=True)),
                ('subscribe_newsletter', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={'db_table': 'masterclass_registrations'},
        ),
        migrations.CreateModel(
            name='GalleryItem',
            fields=[
                primary_key(),
                ('title', models.CharField(max_length=255)),
                ('caption', models.CharField(blank=True, max_length=500)),
                ('description', models.TextField(blank=True)),
                ('media_type', models.CharField(choices=[('image', 'Image'), ('video', 'Video')], default='image', max_length=10)),
                ('image', models.CharField(blank=True, max_length=500)),
                ('video_url', models.CharField(blank=True, max_length=500)),
                ('video_file', models.CharField(blank=True, max_length=500)),
                ('thumbnail', models.CharField(blank=True, max_length=500)),
                ('order', models.IntegerField(default=0)),
                ('is_featured', models.BooleanField(default=False)),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'gallery_items'},
        ),
        migrations.CreateModel(
            name='SiteConfig',
            fields=[
                primary_key(),
                ('site_name', models.CharField(default='Kambel Consult', max_length=200)),
                ('tagline', models.CharField(blank=True, max_length=300)),
                ('footer_about', models.TextField(blank=True)),
                ('privacy_policy', models.TextField(blank=True)),
                ('terms_conditions', models.TextField(blank=True)),
                ('contact_email', models.CharField(blank=True, max_length=254)),
                ('contact_phone', models.CharField(blank=True, max_length=50)),
                ('address', models.CharField(blank=True, max_length=300)),
                ('location', models.CharField(blank=True, max_length=300)),
                ('facebook_url', models.CharField(blank=True, max_length=500)),
                ('twitter_url', models.CharField(blank=True, max_length=500)),
                ('linkedin_url', models.CharField(blank=True, max_length=500)),
                ('instagram_url', models.CharField(blank=True, max_length=500)),
                ('youtube_url', models.CharField(blank=True, max_length=500)),
                *timestamps(),
            ],
            options={'db_table': 'site_config'},
        ),
        migrations.CreateModel(
            name='HeroConfig',
            fields=[
                primary_key(),
                ('hero_title', models.CharField(max_length=300)),
                ('hero_subtitle', models.TextField(blank=True)),
                ('profile_name', models.CharField(blank=True, max_length=200)),
                ('profile_title', models.CharField(default='Chief Executive Officer', max_length=200)),
                ('profile_picture', models.CharField(blank=True, max_length=500)),
                ('years_experience', models.CharField(default='15+', max_length=50)),
                ('years_label', models.CharField(default='Years Experience', max_length=100)),
                ('years_description', models.CharField(default='Professional Development', max_length=200)),
                ('clients_count', models.CharField(default='5000+', max_length=50)),
                ('clients_label', models.CharField(default='Clients', max_length=100)),
                ('clients_description', models.CharField(default='Successfully Helped', max_length=200)),
                ('publications_count', models.CharField(default='50+', max_length=50)),
                ('publications_label', models.CharField(default='Publications', max_length=100)),
                ('publications_description', models.CharField(default='Authored Works', max_length=200)),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'hero_config'},
        ),
        migrations.CreateModel(
            name='AboutConfig',
            fields=[
                primary_key(),
                ('hero_years', models.CharField(blank=True, max_length=50)),
                ('hero_clients', models.CharField(blank=True, max_length=50)),
                ('hero_publications', models.CharField(blank=True, max_length=50)),
                ('hero_speaking', models.CharField(blank=True, max_length=50)),
                ('profile_name', models.CharField(blank=True, max_length=200)),
                ('profile_title', models.CharField(blank=True, max_length=200)),
                ('profile_picture', models.CharField(blank=True, max_length=500)),
                ('bio_summary', models.TextField(blank=True)),
                ('tags', models.TextField(blank=True, help_text='Comma separated')),
                ('philosophy_quote', models.TextField(blank=True)),
                ('cta_title', models.CharField(blank=True, max_length=200)),
                ('cta_description', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                *timestamps(),
            ],
            options={'db_table': 'about_config'},
        ),
        migrations.CreateModel(
            name='JourneyItem',
            fields=[
                *about_child_fields(),
                ('about_config', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='journey_items', to='cms.aboutconfig')),
                ('title', models.CharField(max_length=200)),
                ('organization', models.CharField(blank=True, max_length=200)),
                ('period', models.CharField(blank=True, max_length=100)),
                ('description', models.TextField(blank=True)),
                ('icon', models.CharField(default='briefcase', max_length=100)),
            ],
            options={'db_table': 'professional_journey_items'},
        ),
        migrations.CreateModel(
            name='EducationQualification',
            fields=[
                *about_child_fields(),
                ('about_config', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='education', to='cms.aboutconfig')),
                ('qualification', models.CharField(max_length=200)),
                ('institution', models.CharField(blank=True, max_length=200)),
                ('year', models.CharField(blank=True, max_length=50)),
                ('description', models.TextField(blank=True)),
                ('icon', models.CharField(default='graduation-cap', max_length=100)),
            ],
            options={'db_table': 'education_qualifications'},
        ),
        migrations.CreateModel(
            name='Achievement',
            fields=[
                *about_child_fields(),
                ('about_config', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='achievements', to='cms.aboutconfig')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('year', models.CharField(blank=True, max_length=50)),
                ('icon', models.CharField(default='trophy', max_length=100)),
            ],
            options={'db_table': 'achievements'},
        ),
        migrations.CreateModel(
            name='SpeakingEngagement',
            fields=[
                *about_child_fields(),
                ('about_config', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='speaking_engagements', to='cms.aboutconfig')),
                ('title', models.CharField(max_length=200)),
                ('event', models.CharField(blank=True, max_length=200)),
                ('date', models.CharField(blank=True, max_length=100)),
                ('location', models.CharField(blank=True, max_length=200)),
            ],
            options={'db_table': 'speaking_engagements'},
        ),
        migrations.CreateModel(
            name='SocialMediaLink',
            fields=[
                primary_key(),
                ('platform', models.CharField(max_length=50)),
                ('url', models.CharField(max_length=500)),
                ('icon_class', models.CharField(blank=True, max_length=100)),
                ('order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={'db_table': 'social_media_links'},
        ),
        migrations.CreateModel(
            name='ContactMessage',
            fields=[
                primary_key(),
                ('name', models.CharField(max_length=200)),
                ('email', models.EmailField(max_length=254)),
                ('subject', models.CharField(blank=True, max_length=300)),
                ('message', models.TextField()),
                ('is_read', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={'db_table': 'contact_messages'},
        ),
        migrations.CreateModel(
            name='NewsletterSubscription',
            fields=[
                primary_key(),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('is_active', models.BooleanField(default=True)),
                ('subscribed_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={'db_table': 'newsletter_subscriptions'},
        ),
        migrations.CreateModel(
            name='PageView',
            fields=[
                primary_key(),
                ('path', models.CharField(max_length=500)),
                ('title', models.CharField(blank=True, max_length=500, null=True)),
                ('referrer', models.CharField(blank=True, max_length=1000, null=True)),
                ('user_agent', models.TextField(blank=True, null=True)),
                ('ip_address', models.CharField(blank=True, max_length=100, null=True)),
                ('content_type', models.CharField(blank=True, max_length=50, null=True)),
                ('content_id', models.CharField(blank=True, max_length=100, null=True)),
                ('viewed_at', models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={'db_table': 'page_views'},
        ),
    ]
