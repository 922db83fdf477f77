"""Common Locations - Read-only queries."""
from typing import Dict

from django.core.cache import cache

from .models import Province, District, Tehsil

STATS_CACHE_KEY = 'locations:stats'

# Cache timeout in seconds
CACHE_TIMEOUT = 3600  # 1 hour


class LocationSelector:
    """Read-only location queries with caching."""

    @staticmethod
    def get_statistics() -> Dict[str, int]:
        """Get row counts for provinces, districts and tehsils."""
        result = cache.get(STATS_CACHE_KEY)

        if result is None:
            result = {
                'provinces': Province.objects.count(),
                'districts': District.objects.count(),
                'tehsils': Tehsil.objects.count(),
            }
            cache.set(STATS_CACHE_KEY, result, CACHE_TIMEOUT)

        return result
