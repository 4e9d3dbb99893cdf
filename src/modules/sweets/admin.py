from django.contrib import admin

from modules.sweets.models import Sweet


@admin.register(Sweet)
class SweetAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "price", "quantity", "created_by", "deleted_at"]
    list_filter = ["category", "created_at"]
    search_fields = ["name", "description"]
    ordering = ["name"]
    readonly_fields = ["id", "created_at", "updated_at"]
