import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("boards", "0001_initial"),
        ("catalog", "0001_initial"),
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Employer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("password_hash", models.CharField(blank=True, max_length=256, verbose_name="password hash")),
                ("name", models.CharField(max_length=200, verbose_name="name")),
                ("logo", models.TextField(blank=True, help_text="Image URL or base64 data", verbose_name="logo")),
                ("website", models.CharField(blank=True, max_length=200, verbose_name="website")),
                ("contact_email", models.EmailField(blank=True, db_index=True, max_length=255, verbose_name="contact email")),
                ("phone", models.CharField(blank=True, max_length=20, verbose_name="phone")),
                ("address", models.CharField(blank=True, max_length=200, verbose_name="address")),
                ("description", models.TextField(blank=True, verbose_name="description")),
                ("subscription_type", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="employers", to="catalog.subscription", verbose_name="subscription")),
            ],
            options={
                "verbose_name": "employer",
                "verbose_name_plural": "employers",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="EmployerAd",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("tags", models.TextField(blank=True, help_text="Comma-separated keywords", verbose_name="tags")),
                ("job_description", models.TextField(blank=True, verbose_name="job description")),
                ("employer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="ads", to="employers.employer", verbose_name="employer")),
                ("role", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="employer_ads", to="catalog.role", verbose_name="role")),
            ],
            options={
                "verbose_name": "employer ad",
                "verbose_name_plural": "employer ads",
                "ordering": ["-created"],
            },
        ),
        migrations.CreateModel(
            name="EmployerBoard",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("observed", models.BooleanField(default=False, verbose_name="observed")),
                ("approved", models.BooleanField(default=False, verbose_name="approved")),
                ("meet_request", models.DateTimeField(blank=True, null=True, verbose_name="meeting request")),
                ("message", models.TextField(blank=True, verbose_name="message")),
                ("board", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="employer_boards", to="boards.projectboard", verbose_name="board")),
                ("employer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="boards", to="employers.employer", verbose_name="employer")),
            ],
            options={
                "verbose_name": "employer board",
                "verbose_name_plural": "employer boards",
                "constraints": [models.UniqueConstraint(fields=("employer", "board"), name="unique_employer_board")],
            },
        ),
        migrations.CreateModel(
            name="EmployerCandidate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("employer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="candidates", to="employers.employer", verbose_name="employer")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="employer_candidacies", to="students.student", verbose_name="student")),
            ],
            options={
                "verbose_name": "employer candidate",
                "verbose_name_plural": "employer candidates",
                "ordering": ["-created"],
                "constraints": [models.UniqueConstraint(fields=("employer", "student"), name="unique_employer_candidate")],
            },
        ),
    ]
