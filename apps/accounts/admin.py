from django.contrib import admin

from .models import UserSession


@admin.register(UserSession)
class UserSessionAdmin(admin.ModelAdmin):
    list_display = ['user', 'session_key', 'created_on']
    list_select_related = ['user']
    search_fields = ['user__username', 'user__email']
    readonly_fields = ['user', 'session_key', 'created_on', 'updated_on']
