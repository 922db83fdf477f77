"""
Pakistan Locations - URL Configuration.

The administrative units are managed through the admin site.
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path('admin/', admin.site.urls),
]
