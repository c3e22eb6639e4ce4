from django.db import models
from django.utils.translation import gettext_lazy as _

METHOD = "paypal_pro"
OPTION_KEY = "addon_paypal_pro"
REFUND_URL = "https://www.paypal.com/"

SETTINGS_NONCE_ACTION = "exchange-paypal_pro-settings"
SETTINGS_FORM_PREFIX = "exchange-add-on-paypal_pro"
WIZARD_FORM_PREFIX = "exchange_settings"


class TransactionStatus(models.TextChoices):
    SUCCEEDED = "succeeded", _("Paid")
    REFUNDED = "refunded", _("Refunded")
    PARTIAL_REFUND = "partial-refund", _("Partially Refunded")
    NEEDS_RESPONSE = "needs_response", _("Disputed: PayPal Pro needs a response")
    UNDER_REVIEW = "under_review", _("Disputed: Under review")
    WON = "won", _("Disputed: Won, Paid")


UNKNOWN_STATUS_LABEL = _("Unknown")

CLEARED_FOR_DELIVERY = frozenset({
    TransactionStatus.SUCCEEDED.value,
    TransactionStatus.PARTIAL_REFUND.value,
    TransactionStatus.WON.value,
})
