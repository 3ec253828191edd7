from django.contrib import admin
from .models import TimeEntry


@admin.register(TimeEntry)
class TimeEntryAdmin(admin.ModelAdmin):
    list_display = ['start', 'end', 'duration_display', 'job', 'is_billable', 'rate_display', 'earnings_display']
    list_filter = ['is_billable', 'job', 'start']
    search_fields = ['notes', 'job__name']
    readonly_fields = ['id', 'created_at', 'updated_at', 'duration_display', 'rate_display', 'earnings_display']
    date_hierarchy = 'start'

    fieldsets = (
        ('Time Entry Information', {
            'fields': ('id', 'job', 'start', 'end', 'duration_display', 'notes')
        }),
        ('Billing', {
            'fields': ('is_billable', 'custom_rate', 'rate_display', 'earnings_display')
        }),
        ('Audit Information', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def duration_display(self, obj):
        """Display duration in a human-readable format."""
        if obj.is_in_progress:
            return "In Progress"
        return obj.formatted_duration
    duration_display.short_description = 'Duration'

    def rate_display(self, obj):
        return f"{obj.effective_rate:.2f}"
    rate_display.short_description = 'Rate'

    def earnings_display(self, obj):
        return f"{obj.earnings:.2f}"
    earnings_display.short_description = 'Earnings'
