from django.contrib import admin

from modules.accounts.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["email", "name", "role", "is_active", "created_at"]
    list_filter = ["role", "is_active"]
    search_fields = ["email", "name"]
    ordering = ["email"]
    readonly_fields = ["id", "password", "last_login", "created_at", "updated_at"]
    exclude = ["groups", "user_permissions"]
