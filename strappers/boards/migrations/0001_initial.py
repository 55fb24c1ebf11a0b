import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        ("projects", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ProjectBoard",
            fields=[
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("board_id", models.CharField(max_length=50, primary_key=True, serialize=False, verbose_name="board id")),
                ("start_date", models.DateTimeField(blank=True, null=True, verbose_name="start date")),
                ("end_date", models.DateTimeField(blank=True, null=True, verbose_name="end date")),
                ("due_date", models.DateTimeField(blank=True, null=True, verbose_name="due date")),
                ("sprint_plan", models.JSONField(blank=True, null=True, verbose_name="sprint plan")),
                ("board_url", models.CharField(blank=True, max_length=500, verbose_name="board URL")),
                ("publish_url", models.CharField(blank=True, max_length=500, verbose_name="publish URL")),
                ("movie_url", models.CharField(blank=True, max_length=500, verbose_name="movie URL")),
                ("presentation_url", models.CharField(blank=True, max_length=500, verbose_name="presentation URL")),
                ("next_meeting_time", models.DateTimeField(blank=True, null=True, verbose_name="next meeting time")),
                ("next_meeting_url", models.CharField(blank=True, max_length=500, verbose_name="next meeting URL")),
                ("github_url", models.CharField(blank=True, max_length=500, verbose_name="GitHub URL")),
                ("github_frontend_url", models.CharField(blank=True, max_length=500, verbose_name="GitHub frontend URL")),
                ("github_backend_url", models.CharField(blank=True, max_length=500, verbose_name="GitHub backend URL")),
                ("web_api_url", models.CharField(blank=True, max_length=500, verbose_name="web API URL")),
                ("group_chat", models.CharField(blank=True, max_length=500, verbose_name="group chat")),
                ("facebook_url", models.CharField(blank=True, max_length=500, verbose_name="Facebook URL")),
                ("instagram_url", models.CharField(blank=True, max_length=500, verbose_name="Instagram URL")),
                ("linkedin_url", models.CharField(blank=True, max_length=500, verbose_name="LinkedIn URL")),
                ("youtube_url", models.CharField(blank=True, max_length=500, verbose_name="YouTube URL")),
                ("has_admin", models.BooleanField(default=False, verbose_name="has admin")),
                ("is_system_board", models.BooleanField(default=False, verbose_name="system board")),
                ("system_board_id", models.CharField(blank=True, max_length=50, verbose_name="system board id")),
                ("neon_project_id", models.CharField(blank=True, max_length=100, verbose_name="Neon project id")),
                ("neon_branch_id", models.CharField(blank=True, max_length=100, verbose_name="Neon branch id")),
                ("db_password", models.CharField(blank=True, max_length=256, verbose_name="database password")),
                ("observed", models.PositiveIntegerField(default=0, help_text="Number of employers who observed this board.", verbose_name="observed")),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="boards", to="projects.project", verbose_name="project")),
                ("status", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="boards", to="catalog.projectstatus", verbose_name="status")),
            ],
            options={
                "verbose_name": "project board",
                "verbose_name_plural": "project boards",
                "ordering": ["-created"],
            },
        ),
        migrations.CreateModel(
            name="BoardMeeting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("meeting_time", models.DateTimeField(verbose_name="meeting time")),
                ("student_email", models.EmailField(db_index=True, max_length=255, verbose_name="student email")),
                ("custom_meeting_url", models.CharField(blank=True, max_length=500, verbose_name="custom meeting URL")),
                ("actual_meeting_url", models.CharField(blank=True, max_length=500, verbose_name="actual meeting URL")),
                ("attended", models.BooleanField(default=False, verbose_name="attended")),
                ("join_time", models.DateTimeField(blank=True, null=True, verbose_name="join time")),
                ("board", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="meetings", to="boards.projectboard", verbose_name="board")),
            ],
            options={
                "verbose_name": "board meeting",
                "verbose_name_plural": "board meetings",
                "ordering": ["board", "meeting_time"],
            },
        ),
        migrations.CreateModel(
            name="BoardState",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("source", models.CharField(help_text="e.g. 'railway', 'github'", max_length=50, verbose_name="source")),
                ("webhook", models.BooleanField(blank=True, null=True, verbose_name="webhook")),
                ("github_branch", models.CharField(blank=True, max_length=200, verbose_name="GitHub branch")),
                ("dev_role", models.CharField(blank=True, max_length=100, verbose_name="developer role")),
                ("mentor_feedback", models.TextField(blank=True, verbose_name="mentor feedback")),
                ("service_name", models.CharField(blank=True, max_length=200, verbose_name="service name")),
                ("error_message", models.TextField(blank=True, verbose_name="error message")),
                ("file", models.CharField(blank=True, max_length=500, verbose_name="file")),
                ("line", models.IntegerField(blank=True, null=True, verbose_name="line")),
                ("stack_trace", models.TextField(blank=True, verbose_name="stack trace")),
                ("request_url", models.CharField(blank=True, max_length=1000, verbose_name="request URL")),
                ("request_method", models.CharField(blank=True, max_length=10, verbose_name="request method")),
                ("timestamp", models.DateTimeField(blank=True, null=True, verbose_name="timestamp")),
                ("last_build_status", models.CharField(blank=True, max_length=50, verbose_name="last build status")),
                ("last_build_output", models.TextField(blank=True, verbose_name="last build output")),
                ("latest_error_summary", models.TextField(blank=True, verbose_name="latest error summary")),
                ("sprint_number", models.IntegerField(blank=True, null=True, verbose_name="sprint number")),
                ("branch_name", models.CharField(blank=True, max_length=200, verbose_name="branch name")),
                ("branch_url", models.CharField(blank=True, max_length=500, verbose_name="branch URL")),
                ("latest_commit_id", models.CharField(blank=True, max_length=100, verbose_name="latest commit id")),
                ("latest_commit_description", models.TextField(blank=True, verbose_name="latest commit description")),
                ("latest_commit_date", models.DateTimeField(blank=True, null=True, verbose_name="latest commit date")),
                ("last_merge_date", models.DateTimeField(blank=True, null=True, verbose_name="last merge date")),
                ("latest_event", models.CharField(blank=True, max_length=100, verbose_name="latest event")),
                ("pr_status", models.CharField(blank=True, max_length=50, verbose_name="pull request status")),
                ("branch_status", models.CharField(blank=True, max_length=50, verbose_name="branch status")),
                ("board", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="states", to="boards.projectboard", verbose_name="board")),
            ],
            options={
                "verbose_name": "board state",
                "verbose_name_plural": "board states",
                "ordering": ["board", "source", "github_branch"],
                "constraints": [models.UniqueConstraint(fields=("board", "source", "webhook", "github_branch"), name="unique_board_state")],
            },
        ),
        migrations.CreateModel(
            name="FigmaConnection",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name="created")),
                ("modified", model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name="modified")),
                ("access_token", models.TextField(verbose_name="access token")),
                ("refresh_token", models.TextField(blank=True, verbose_name="refresh token")),
                ("token_expiry", models.DateTimeField(blank=True, null=True, verbose_name="token expiry")),
                ("figma_user_id", models.CharField(blank=True, max_length=100, verbose_name="Figma user id")),
                ("file_url", models.CharField(blank=True, max_length=500, verbose_name="file URL")),
                ("file_key", models.CharField(blank=True, max_length=100, verbose_name="file key")),
                ("last_sync", models.DateTimeField(blank=True, null=True, verbose_name="last sync")),
                ("board", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="figma_connections", to="boards.projectboard", verbose_name="board")),
            ],
            options={
                "verbose_name": "Figma connection",
                "verbose_name_plural": "Figma connections",
                "constraints": [models.UniqueConstraint(condition=models.Q(("file_key", ""), _negated=True), fields=("file_key",), name="unique_figma_file_key")],
            },
        ),
    ]
