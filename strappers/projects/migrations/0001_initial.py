import django.db.models.deletion
import django.utils.timezone
import django_fsm
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        ("organizations", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("title", models.CharField(max_length=200, verbose_name="title")),
                ("description", models.CharField(blank=True, max_length=1000, verbose_name="description")),
                ("extended_description", models.TextField(blank=True, verbose_name="extended description")),
                ("system_design", models.TextField(blank=True, verbose_name="system design")),
                ("system_design_formatted", models.CharField(blank=True, max_length=2000, verbose_name="formatted system design")),
                ("system_design_doc", models.BinaryField(blank=True, null=True, verbose_name="system design document")),
                ("data_schema", models.TextField(blank=True, verbose_name="data schema")),
                ("customer_past_story", models.TextField(blank=True, verbose_name="customer past story")),
                ("priority", models.CharField(choices=[("Low", "Low"), ("Medium", "Medium"), ("High", "High"), ("Critical", "Critical")], default="Medium", max_length=50, verbose_name="priority")),
                ("is_available", models.BooleanField(default=True, verbose_name="available")),
                ("kickoff", models.BooleanField(default=False, verbose_name="kickoff")),
                ("trello_board_json", models.JSONField(blank=True, null=True, verbose_name="Trello board")),
                ("deployment_manifest", models.TextField(blank=True, verbose_name="deployment manifest")),
                ("ide_generation_status", django_fsm.FSMField(choices=[("not_started", "Not started"), ("in_progress", "In progress"), ("completed", "Completed"), ("failed", "Failed")], default="not_started", max_length=50, verbose_name="IDE generation status")),
                ("total_chunks", models.PositiveIntegerField(default=0, verbose_name="total chunks")),
                ("completed_chunks", models.PositiveIntegerField(default=0, verbose_name="completed chunks")),
                ("mock_records_count", models.PositiveIntegerField(default=10, verbose_name="mock records count")),
                ("criteria", models.ManyToManyField(blank=True, related_name="projects", to="catalog.projectcriteria", verbose_name="criteria")),
                ("organization", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="projects", to="organizations.organization", verbose_name="organization")),
            ],
            options={
                "verbose_name": "project",
                "verbose_name_plural": "projects",
                "ordering": ["-created"],
            },
        ),
        migrations.CreateModel(
            name="DesignVersion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("version_number", models.PositiveIntegerField(verbose_name="version number")),
                ("design_document", models.TextField(verbose_name="design document")),
                ("design_document_pdf", models.BinaryField(blank=True, null=True, verbose_name="design document (PDF)")),
                ("created_by", models.CharField(blank=True, max_length=255, verbose_name="created by")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="active")),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="design_versions", to="projects.project", verbose_name="project")),
            ],
            options={
                "verbose_name": "design version",
                "verbose_name_plural": "design versions",
                "ordering": ["project", "-version_number"],
                "constraints": [models.UniqueConstraint(fields=("project", "version_number"), name="unique_design_version_per_project")],
            },
        ),
        migrations.CreateModel(
            name="ProjectModule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("title", models.CharField(max_length=100, verbose_name="title")),
                ("description", models.TextField(blank=True, verbose_name="description")),
                ("sequence", models.PositiveIntegerField(blank=True, db_index=True, null=True, verbose_name="sequence")),
                ("module_type", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="project_modules", to="catalog.moduletype", verbose_name="module type")),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="modules", to="projects.project", verbose_name="project")),
            ],
            options={
                "verbose_name": "project module",
                "verbose_name_plural": "project modules",
                "ordering": ["project", "sequence", "id"],
            },
        ),
        migrations.CreateModel(
            name="IDEChunk",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("chunk_id", models.CharField(max_length=100, verbose_name="chunk id")),
                ("chunk_type", models.CharField(max_length=50, verbose_name="chunk type")),
                ("description", models.TextField(blank=True, verbose_name="description")),
                ("generation_order", models.PositiveIntegerField(db_index=True, default=0, verbose_name="generation order")),
                ("status", django_fsm.FSMField(choices=[("pending", "Pending"), ("in_progress", "In progress"), ("completed", "Completed"), ("failed", "Failed")], default="pending", max_length=50, verbose_name="status")),
                ("files", models.JSONField(blank=True, default=list, verbose_name="files")),
                ("files_count", models.PositiveIntegerField(default=0, verbose_name="files count")),
                ("dependencies", models.JSONField(blank=True, default=list, verbose_name="dependencies")),
                ("error_message", models.TextField(blank=True, verbose_name="error message")),
                ("tokens_used", models.PositiveIntegerField(blank=True, null=True, verbose_name="tokens used")),
                ("generation_time_ms", models.PositiveIntegerField(blank=True, null=True, verbose_name="generation time (ms)")),
                ("generated_at", models.DateTimeField(blank=True, null=True, verbose_name="generated at")),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="ide_chunks", to="projects.project", verbose_name="project")),
            ],
            options={
                "verbose_name": "IDE chunk",
                "verbose_name_plural": "IDE chunks",
                "ordering": ["project", "generation_order"],
                "constraints": [models.UniqueConstraint(fields=("project", "chunk_id"), name="unique_ide_chunk_per_project")],
            },
        ),
    ]
