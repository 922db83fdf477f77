"""Common Locations - Administrative Units Models.

Pakistani administrative units (Province/District/Tehsil):
- slug is unique per table, across all parents
- names are stored title-cased and are only meaningful within their parent
- rows are append-only from the importer's point of view
"""
from django.db import models

from apps.common.core.models import TimeStampedModel


class Province(TimeStampedModel):
    """Pakistani Province (or federal territory)."""
    name = models.CharField(max_length=100, verbose_name='Name')
    slug = models.SlugField(max_length=100, unique=True, verbose_name='Slug')

    class Meta:
        verbose_name = 'Province'
        verbose_name_plural = 'Provinces'
        ordering = ['name']

    def __str__(self) -> str:
        return self.name

    @property
    def district_count(self) -> int:
        return self.districts.count()


class District(TimeStampedModel):
    """Pakistani District (Zila)."""
    province = models.ForeignKey(Province, on_delete=models.CASCADE, related_name='districts', verbose_name='Province')
    name = models.CharField(max_length=100, verbose_name='Name')
    slug = models.SlugField(max_length=150, unique=True, verbose_name='Slug')

    class Meta:
        verbose_name = 'District'
        verbose_name_plural = 'Districts'
        ordering = ['province', 'name']
        indexes = [
            models.Index(fields=['province', 'name'], name='loc_district_province_name_idx'),
        ]

    def __str__(self) -> str:
        return self.name

    @property
    def tehsil_count(self) -> int:
        return self.tehsils.count()


class Tehsil(TimeStampedModel):
    """Pakistani Tehsil (Taluka/Sub-division)."""
    district = models.ForeignKey(District, on_delete=models.CASCADE, related_name='tehsils', verbose_name='District')
    name = models.CharField(max_length=100, verbose_name='Name')
    # Room for "<tehsil>-<district>" disambiguated slugs
    slug = models.SlugField(max_length=255, unique=True, verbose_name='Slug')

    class Meta:
        verbose_name = 'Tehsil'
        verbose_name_plural = 'Tehsils'
        ordering = ['district', 'name']
        indexes = [
            models.Index(fields=['district', 'name'], name='loc_tehsil_district_name_idx'),
        ]

    def __str__(self) -> str:
        return self.name

    @property
    def full_name(self) -> str:
        """Get full name: Tehsil, District, Province."""
        return f"{self.name}, {self.district.name}, {self.district.province.name}"

    @property
    def province(self):
        """Shortcut to get province."""
        return self.district.province
