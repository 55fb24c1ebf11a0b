from django.contrib.auth.hashers import check_password
from django.contrib.auth.hashers import make_password
from django.db import models
from django.utils.translation import gettext_lazy as _
from model_utils.models import TimeStampedModel


class BaseModel(TimeStampedModel):
    """
    Base model with created/modified timestamps.

    All models should inherit from this class for consistency.
    Provides:
        - id: auto-incremented integer primary key (DEFAULT_AUTO_FIELD)
        - created: DateTimeField auto-set on creation
        - modified: DateTimeField auto-updated on save
    """

    class Meta:
        abstract = True


class PasswordHashMixin(models.Model):
    """
    Stores a Django password hash for accounts that are not auth users.

    Students, organizations and employers log in with their own credentials;
    only the hash is persisted.
    """

    password_hash = models.CharField(
        _("password hash"),
        max_length=256,
        blank=True,
    )

    class Meta:
        abstract = True

    def set_password(self, raw_password: str | None) -> None:
        """Hash and store ``raw_password``. ``None`` clears the hash."""
        self.password_hash = make_password(raw_password) if raw_password else ""

    def check_password(self, raw_password: str) -> bool:
        """Return True if ``raw_password`` matches the stored hash."""
        if not self.password_hash or not raw_password:
            return False
        return check_password(raw_password, self.password_hash)

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash)
