from django.conf import settings
from django.db import models


class Option(models.Model):
    """One opaque settings record stored under a key, e.g. ``addon_paypal_pro``."""

    key = models.CharField(max_length=191, unique=True)
    value = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.key


class Customer(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="exchange_customer")
    customer_id = models.CharField(max_length=50, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at",)

    def __str__(self) -> str:
        return self.customer_id


class Transaction(models.Model):
    method = models.CharField(max_length=64, db_index=True)  # add-on slug, e.g. "paypal_pro"
    method_id = models.CharField(max_length=128)  # gateway payment id
    status = models.CharField(max_length=32, db_index=True)
    customer = models.ForeignKey(
        Customer, on_delete=models.PROTECT, related_name="transactions", null=True, blank=True
    )
    cart_object = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at",)
        constraints = [
            models.UniqueConstraint(fields=["method", "method_id"], name="exchange_unique_method_payment"),
        ]

    def __str__(self):
        return f"{self.method}:{self.method_id} ({self.status})"
