from django.contrib import admin
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ['name', 'is_completed', 'deadline', 'date_created', 'updated_at']
    list_filter = ['is_completed']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'date_created', 'updated_at']

    fieldsets = (
        ('Project Information', {
            'fields': ('id', 'name', 'description', 'deadline', 'is_completed')
        }),
        ('Audit Information', {
            'fields': ('date_created', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
