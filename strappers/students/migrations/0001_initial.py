import django.db.models.deletion
import django.utils.timezone
import django_fsm
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("boards", "0001_initial"),
        ("catalog", "0001_initial"),
        ("projects", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Student",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("password_hash", models.CharField(blank=True, max_length=256, verbose_name="password hash")),
                ("first_name", models.CharField(max_length=100, verbose_name="first name")),
                ("last_name", models.CharField(max_length=100, verbose_name="last name")),
                ("email", models.EmailField(max_length=255, unique=True, verbose_name="email")),
                ("student_number", models.CharField(blank=True, max_length=50, verbose_name="student number")),
                ("linkedin_url", models.CharField(blank=True, max_length=500, verbose_name="LinkedIn URL")),
                ("github_user", models.CharField(blank=True, max_length=100, verbose_name="GitHub user")),
                ("photo", models.TextField(blank=True, help_text="Image URL or base64 data", verbose_name="photo")),
                ("cv", models.TextField(blank=True, verbose_name="CV")),
                ("is_admin", models.BooleanField(default=False, verbose_name="admin")),
                ("is_available", models.BooleanField(default=True, verbose_name="available")),
                ("status", django_fsm.FSMIntegerField(choices=[(0, "New"), (1, "Pending"), (3, "On board")], default=0, verbose_name="status")),
                ("start_pending_at", models.DateTimeField(blank=True, null=True, verbose_name="pending since")),
                ("minutes_to_work", models.PositiveIntegerField(blank=True, null=True, verbose_name="minutes to work")),
                ("hybrid_work", models.BooleanField(default=False, verbose_name="hybrid work")),
                ("home_work", models.BooleanField(default=False, verbose_name="home work")),
                ("full_time_work", models.BooleanField(default=False, verbose_name="full-time work")),
                ("part_time_work", models.BooleanField(default=False, verbose_name="part-time work")),
                ("freelance_work", models.BooleanField(default=False, verbose_name="freelance work")),
                ("travel_work", models.BooleanField(default=False, verbose_name="work with travel")),
                ("night_shift_work", models.BooleanField(default=False, verbose_name="night shift work")),
                ("relocation_work", models.BooleanField(default=False, verbose_name="work with relocation")),
                ("student_work", models.BooleanField(default=False, verbose_name="student job")),
                ("multilingual_work", models.BooleanField(default=False, verbose_name="multilingual work")),
                ("board", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="students", to="boards.projectboard", verbose_name="board")),
                ("major", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="students", to="catalog.major", verbose_name="major")),
                ("programming_language", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="students", to="catalog.programminglanguage", verbose_name="programming language")),
                ("project", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="allocated_students", to="projects.project", verbose_name="allocated project")),
                ("project_priority_1", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="priority_1_students", to="projects.project", verbose_name="project priority 1")),
                ("project_priority_2", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="priority_2_students", to="projects.project", verbose_name="project priority 2")),
                ("project_priority_3", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="priority_3_students", to="projects.project", verbose_name="project priority 3")),
                ("project_priority_4", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="priority_4_students", to="projects.project", verbose_name="project priority 4")),
                ("subscription_type", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="students", to="catalog.subscription", verbose_name="subscription")),
                ("year", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="students", to="catalog.year", verbose_name="year")),
            ],
            options={
                "verbose_name": "student",
                "verbose_name_plural": "students",
                "ordering": ["last_name", "first_name"],
                "constraints": [models.UniqueConstraint(condition=models.Q(("student_number", ""), _negated=True), fields=("student_number",), name="unique_student_number")],
            },
        ),
        migrations.CreateModel(
            name="StudentRole",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("assigned_at", models.DateTimeField(default=django.utils.timezone.now, verbose_name="assigned at")),
                ("end_date", models.DateTimeField(blank=True, null=True, verbose_name="end date")),
                ("notes", models.CharField(blank=True, max_length=200, verbose_name="notes")),
                ("is_active", models.BooleanField(default=True, verbose_name="active")),
                ("role", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="student_roles", to="catalog.role", verbose_name="role")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="roles", to="students.student", verbose_name="student")),
            ],
            options={
                "verbose_name": "student role",
                "verbose_name_plural": "student roles",
                "ordering": ["student", "-assigned_at"],
            },
        ),
    ]
