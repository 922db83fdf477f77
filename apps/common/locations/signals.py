"""Common Locations - Signal Handlers."""
import logging
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
from django.core.cache import cache

from .selectors import STATS_CACHE_KEY

logger = logging.getLogger('apps.locations.signals')


@receiver(post_save, sender='locations.Province')
@receiver(post_save, sender='locations.District')
@receiver(post_save, sender='locations.Tehsil')
@receiver(post_delete, sender='locations.Province')
@receiver(post_delete, sender='locations.District')
@receiver(post_delete, sender='locations.Tehsil')
def on_location_changed(sender, instance, **kwargs):
    """Invalidate cached location statistics."""
    try:
        cache.delete(STATS_CACHE_KEY)
    except Exception as e:
        logger.warning(f"Error invalidating location stats cache: {e}")
