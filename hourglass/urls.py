"""
URL configuration for the hourglass project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import path, include
from hourglass import views as home_views

urlpatterns = [
    path("admin/", admin.site.urls),
    path("projects/", include("projects.urls")),
    path("jobs/", include("jobs.urls")),
    path("entries/", include("time_entries.urls")),
    path("settings/", include("settings.urls")),
    path("", home_views.home, name='home'),
]
