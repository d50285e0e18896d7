from django.contrib import admin
from .models import StoredValue


@admin.register(StoredValue)
class StoredValueAdmin(admin.ModelAdmin):
    """Admin interface for the key/value storage"""
    list_display = ['key', 'value_preview', 'updated_at']
    search_fields = ['key']
    readonly_fields = ['updated_at']
    ordering = ['key']

    def value_preview(self, obj):
        return obj.value[:80] + '...' if len(obj.value) > 80 else obj.value
    value_preview.short_description = 'Value'
