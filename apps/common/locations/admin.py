"""Common Locations - Admin Configuration."""
from django.contrib import admin
from django.utils.html import format_html
from unfold.admin import ModelAdmin

from .models import Province, District, Tehsil


@admin.register(Province)
class ProvinceAdmin(ModelAdmin):
    list_display = ['name', 'slug', 'district_count_display', 'created_at']
    search_fields = ['name', 'slug']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['name']

    fieldsets = (
        ('Basic Info', {'fields': ('name', 'slug')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    @admin.display(description='Districts')
    def district_count_display(self, obj):
        return format_html('<span style="font-weight: bold;">{}</span>', obj.district_count)


@admin.register(District)
class DistrictAdmin(ModelAdmin):
    list_display = ['name', 'slug', 'province', 'tehsil_count_display']
    list_filter = ['province']
    search_fields = ['name', 'slug', 'province__name']
    autocomplete_fields = ['province']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['province', 'name']

    fieldsets = (
        ('Basic Info', {'fields': ('province', 'name', 'slug')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    @admin.display(description='Tehsils')
    def tehsil_count_display(self, obj):
        return format_html('<span style="font-weight: bold;">{}</span>', obj.tehsil_count)


@admin.register(Tehsil)
class TehsilAdmin(ModelAdmin):
    list_display = ['name', 'slug', 'district', 'province_display']
    list_filter = ['district__province']
    search_fields = ['name', 'slug', 'district__name', 'district__province__name']
    autocomplete_fields = ['district']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['district', 'name']

    fieldsets = (
        ('Basic Info', {'fields': ('district', 'name', 'slug')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('district__province')

    @admin.display(description='Province')
    def province_display(self, obj):
        return obj.district.province.name
