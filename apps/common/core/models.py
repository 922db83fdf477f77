"""Common Core - Base Models."""
from django.db import models


class TimeStampedModel(models.Model):
    """Abstract base model with automatic created/updated timestamps."""
    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Created At')
    updated_at = models.DateTimeField(auto_now=True, verbose_name='Updated At')

    class Meta:
        abstract = True
        ordering = ['-created_at']
