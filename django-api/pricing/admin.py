from django.contrib import admin

from pricing.models import PricingConfigRecord


@admin.register(PricingConfigRecord)
class PricingConfigRecordAdmin(admin.ModelAdmin):
    list_display = ["key", "version", "updated_at"]
    search_fields = ["key"]
    readonly_fields = ["version", "created_at", "updated_at"]
