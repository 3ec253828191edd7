from django.contrib import admin
from .models import Setting


@admin.register(Setting)
class SettingAdmin(admin.ModelAdmin):
    list_display = ['key', 'value', 'description', 'updated_at']
    list_editable = ['value']
    search_fields = ['key', 'description']
    readonly_fields = ['created_at', 'updated_at']
    fields = ['key', 'value', 'description', 'created_at', 'updated_at']
