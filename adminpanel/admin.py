from django.contrib import admin
from .models import PanelSession


@admin.register(PanelSession)
class PanelSessionAdmin(admin.ModelAdmin):
    """Operators' stored panel state; delete a row to force a remount"""
    list_display = ['user', 'updated_at']
    search_fields = ['user__username']
    readonly_fields = ['updated_at']
