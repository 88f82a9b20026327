"""
Shared abstract models

- TimeStampedModel: created/updated timestamps
- SoftDeleteModel: soft delete (is_active) + active manager
- OwnedModel: owner-scoped soft-deletable record
"""

from django.conf import settings
from django.db import models


class TimeStampedModel(models.Model):
    """Tracks creation and modification time"""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class SoftDeleteManager(models.Manager):
    """Manager that only returns active rows"""

    def get_queryset(self):
        return super().get_queryset().filter(is_active=True)


class SoftDeleteModel(TimeStampedModel):
    """
    Abstract model with soft delete support

    Fields:
        is_active: False once the row has been deleted

    Managers:
        objects: every row (deleted included)
        active: active rows only
    """
    is_active = models.BooleanField(default=True, db_index=True)

    objects = models.Manager()
    active = SoftDeleteManager()

    class Meta:
        abstract = True

    def soft_delete(self):
        """Mark the row deleted (is_active=False)"""
        self.is_active = False
        self.save(update_fields=['is_active', 'updated_at'])

    def restore(self):
        """Undo a soft delete"""
        self.is_active = True
        self.save(update_fields=['is_active', 'updated_at'])


class OwnedModel(SoftDeleteModel):
    """Record owned by a single user; every lookup is scoped by it"""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='%(class)s_set',
        db_index=True,
    )

    class Meta:
        abstract = True

    def is_owner(self, user):
        return self.user_id == getattr(user, 'pk', None)
