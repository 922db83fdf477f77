"""Common Utils Package."""
from .string import (
    slugify_name,
    title_case,
)

__all__ = [
    'slugify_name',
    'title_case',
]
