"""
Core abstract models for the application.
"""
from django.db import models
from django.conf import settings


class TimeStampedModel(models.Model):
    """Abstract base model with created and updated timestamps."""
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='建立時間'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='更新時間'
    )

    class Meta:
        abstract = True


class UserTrackingModel(TimeStampedModel):
    """Abstract model that tracks user who created/updated the record."""
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(class)s_created',
        verbose_name='建立者'
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(class)s_updated',
        verbose_name='更新者'
    )

    class Meta:
        abstract = True


class BaseModel(UserTrackingModel):
    """Complete base model with timestamps and user tracking."""
    id = models.BigAutoField(primary_key=True)

    class Meta:
        abstract = True
