"""PayPal Pro settings page and setup wizard fields.

Exchange links to the settings page from its add-ons screen and calls
:func:`settings_view` for both GET and POST. The setup wizard shows the same
fields under the ``exchange_settings`` prefix, via the
``print_paypal_pro_wizard_settings`` and ``save_paypal_pro_wizard_settings``
filters. Everything is stored as one record under ``addon_paypal_pro``.
"""

import logging

from django.shortcuts import render
from django.template.loader import render_to_string
from django.urls import reverse
from django.utils.translation import gettext as _

from exchange.addons import is_addon_enabled
from exchange.hooks import apply_filters
from exchange.nonces import create_nonce, verify_nonce
from exchange.options import get_option, save_option

from .constants import METHOD, OPTION_KEY, SETTINGS_FORM_PREFIX, SETTINGS_NONCE_ACTION, WIZARD_FORM_PREFIX
from .forms import PayPalProSettingsForm

logger = logging.getLogger(__name__)

NONCE_FIELD = "_nonce"
WIZARD_SUBMITTED_FIELD = f"{WIZARD_FORM_PREFIX}-wizard-submitted"

WIZARD_FIELDS = [
    "paypal_pro_api_username",
    "paypal_pro_api_password",
    "paypal_pro_api_signature",
    "paypal_pro_sandbox_mode",
    "paypal_pro_purchase_button_label",
]


def default_settings(values):
    defaults = {
        "paypal_pro_api_username": "",
        "paypal_pro_api_password": "",
        "paypal_pro_api_signature": "",
        "paypal_pro_sandbox_mode": False,
        "paypal_pro_purchase_button_label": _("Purchase"),
    }
    return {**defaults, **(values or {})}


class PayPalProAddOn:
    """Settings page for PayPal Pro.

    Create one per request. Messages produced while saving are kept on
    ``status_message`` and ``error_message`` and shown by the next render.
    """

    def __init__(self):
        self.status_message = ""
        self.error_message = ""
        self._posted_values = None

    def print_settings_page(self, request):
        settings = get_option(OPTION_KEY)
        form_values = settings if not self.error_message else (self._posted_values or settings)
        form = PayPalProSettingsForm(initial=form_values, prefix=SETTINGS_FORM_PREFIX)
        ctx = {
            "form_id": apply_filters("add_on_paypal_pro", "exchange-add-on-paypal_pro-settings"),
            "action": reverse("exchange:addon_settings", args=[METHOD]),
            "nonce_field": NONCE_FIELD,
            "nonce": create_nonce(request, SETTINGS_NONCE_ACTION),
            "form_table": self.render_form_table(request, form),
            "status_message": self.status_message,
            "error_message": self.error_message,
        }
        return render(request, "paypal_pro/settings.html", ctx)

    def render_form_table(self, request, form, wizard=False):
        return render_to_string("paypal_pro/form_table.html", {"form": form, "wizard": wizard}, request=request)

    def save_settings(self, request):
        defaults = get_option(OPTION_KEY)
        posted = PayPalProSettingsForm(request.POST, prefix=SETTINGS_FORM_PREFIX).posted_values()
        new_values = {**defaults, **posted}
        self._posted_values = new_values

        if not verify_nonce(request, request.POST.get(NONCE_FIELD), SETTINGS_NONCE_ACTION):
            logger.warning("PayPal Pro settings not saved: invalid security token")
            self.error_message = _("Error. Please try again")
            return

        errors = apply_filters("add_on_paypal_pro_validate_settings", self.get_form_errors(new_values), new_values)
        if errors:
            self.error_message = "\n".join(str(e) for e in errors)
        elif save_option(OPTION_KEY, new_values):
            self.status_message = _("Settings saved.")
        else:
            self.status_message = _("Settings not saved.")

    def save_wizard_settings(self, request):
        """Save the wizard's PayPal Pro fields.

        Returns None on success (or when the wizard was not submitted) and the
        list of error messages when validation or the save fails.
        """
        if not request.POST.get(WIZARD_SUBMITTED_FIELD):
            return None

        fields = apply_filters("default_wizard_paypal_pro_settings", list(WIZARD_FIELDS))
        posted = PayPalProSettingsForm(request.POST, prefix=WIZARD_FORM_PREFIX).posted_values(fields)
        settings = {**get_option(OPTION_KEY), **posted}

        errors = self.get_form_errors(settings)
        if errors:
            return errors

        if not save_option(OPTION_KEY, settings):
            return [_("Settings not saved.")]
        self.status_message = _("Settings Saved.")
        return None

    def get_form_errors(self, values):
        errors = []
        if not values.get("paypal_pro_api_username"):
            errors.append(_("Please include your PayPal Pro API Username"))
        if not values.get("paypal_pro_api_password"):
            errors.append(_("Please include your PayPal Pro API Password"))
        if not values.get("paypal_pro_api_signature"):
            errors.append(_("Please include your PayPal Pro API Signature"))
        return errors


def settings_view(request):
    addon = PayPalProAddOn()
    if request.method == "POST":
        addon.save_settings(request)
    return addon.print_settings_page(request)


def print_wizard_settings(html, request):
    addon = PayPalProAddOn()
    settings = get_option(OPTION_KEY)
    posted = PayPalProSettingsForm(request.POST or None, prefix=WIZARD_FORM_PREFIX).posted_values()
    form = PayPalProSettingsForm(initial={**settings, **posted}, prefix=WIZARD_FORM_PREFIX)
    ctx = {
        "enabled": is_addon_enabled(METHOD),
        "method": METHOD,
        "form_table": addon.render_form_table(request, form, wizard=True),
    }
    return html + render_to_string("paypal_pro/wizard_settings.html", ctx, request=request)


def save_wizard_settings(errors, request):
    if errors:
        return errors
    return PayPalProAddOn().save_wizard_settings(request)
