from django.contrib import admin
from django.utils.html import format_html

from .models import Customer, Option, Transaction
from .transactions import get_refund_url, get_transaction_status_label, transaction_is_cleared_for_delivery


@admin.register(Option)
class OptionAdmin(admin.ModelAdmin):
    list_display = ("key", "updated_at")
    search_fields = ("key",)


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("customer_id", "user", "created_at")
    search_fields = ("customer_id", "user__username", "user__email")


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ("id", "method", "method_id", "status_label", "cleared_for_delivery", "customer", "created_at")
    list_filter = ("method", "status")
    search_fields = ("method_id", "customer__customer_id")
    readonly_fields = ("cart_object", "refund_link")
    ordering = ("-created_at",)

    @admin.display(description="Status")
    def status_label(self, obj):
        return get_transaction_status_label(obj)

    @admin.display(description="Cleared for delivery", boolean=True)
    def cleared_for_delivery(self, obj):
        return transaction_is_cleared_for_delivery(obj)

    @admin.display(description="Refund")
    def refund_link(self, obj):
        url = get_refund_url(obj)
        if not url:
            return "-"
        return format_html('<a href="{}" target="_blank">Refund Transaction</a>', url)
