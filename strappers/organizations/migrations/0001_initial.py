import django.utils.timezone
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Organization",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("password_hash", models.CharField(blank=True, max_length=256, verbose_name="password hash")),
                ("name", models.CharField(max_length=200, verbose_name="name")),
                ("description", models.CharField(blank=True, max_length=1000, verbose_name="description")),
                ("website", models.CharField(blank=True, max_length=200, verbose_name="website")),
                ("contact_email", models.EmailField(blank=True, db_index=True, max_length=255, verbose_name="contact email")),
                ("phone", models.CharField(blank=True, max_length=20, verbose_name="phone")),
                ("address", models.CharField(blank=True, max_length=200, verbose_name="address")),
                ("type", models.CharField(blank=True, help_text="e.g. 'University', 'Company', 'Non-profit'", max_length=50, verbose_name="type")),
                ("logo", models.TextField(blank=True, help_text="Image URL or base64 data", verbose_name="logo")),
                ("terms_use", models.TextField(blank=True, verbose_name="terms of use")),
                ("terms_accepted", models.BooleanField(default=False, verbose_name="terms accepted")),
                ("terms_accepted_at", models.DateTimeField(blank=True, null=True, verbose_name="terms accepted at")),
                ("is_active", models.BooleanField(default=True, verbose_name="active")),
            ],
            options={
                "verbose_name": "organization",
                "verbose_name_plural": "organizations",
                "ordering": ["name"],
            },
        ),
    ]
