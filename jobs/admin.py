from django.contrib import admin

from time_entries.models import TimeEntry
from .models import Job


class TimeEntryInline(admin.TabularInline):
    model = TimeEntry
    extra = 0
    fields = ['start', 'end', 'is_billable', 'custom_rate', 'notes']
    ordering = ['-start']


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ['name', 'hourly_rate', 'color_theme', 'icon_name', 'is_completed', 'total_time_display', 'date_created']
    list_filter = ['is_completed', 'color_theme']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'date_created', 'updated_at', 'total_time_display']
    inlines = [TimeEntryInline]

    fieldsets = (
        ('Job Information', {
            'fields': ('id', 'name', 'description', 'project', 'hourly_rate', 'is_completed')
        }),
        ('Appearance', {
            'fields': ('color_theme', 'icon_name')
        }),
        ('Audit Information', {
            'fields': ('date_created', 'updated_at', 'total_time_display'),
            'classes': ('collapse',)
        }),
    )

    def total_time_display(self, obj):
        """Total logged time in a human-readable format."""
        return obj.formatted_total_logged_time
    total_time_display.short_description = 'Total Time'
