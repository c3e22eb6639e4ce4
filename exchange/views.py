import logging

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.http import Http404
from django.shortcuts import redirect, render
from django.utils.safestring import mark_safe
from django.utils.translation import gettext as _
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_http_methods

from .addons import TRANSACTION_METHODS, get_addon, get_addons, get_enabled_addons
from .cart import empty_cart, get_cart
from .hooks import apply_filters
from .transactions import do_transaction

logger = logging.getLogger(__name__)

WIZARD_SUBMITTED_FIELD = "exchange_settings-wizard-submitted"
WIZARD_METHODS_FIELD = "exchange-transaction-methods"


@never_cache
@require_http_methods(["GET", "POST"])
def checkout_view(request):
    cart = get_cart(request)

    if request.method == "POST":
        method = (request.POST.get("exchange-transaction-method") or "").strip()
        enabled = {a.slug for a in get_enabled_addons(TRANSACTION_METHODS)}
        if method not in enabled:
            messages.error(request, _("Please select a payment method."))
            return redirect("exchange:checkout")

        transaction_object = {"total": cart["total"], "products": cart["products"]}
        transaction_id = do_transaction(method, transaction_object, request)
        if not transaction_id:
            # the add-on has already queued its error messages
            return redirect("exchange:checkout")

        empty_cart(request)
        messages.success(request, _("Thank you for your order."))
        return redirect("exchange:checkout")

    buttons = [
        mark_safe(apply_filters(f"get_{addon.slug}_make_payment_button", {}, cart, request) or "")
        for addon in get_enabled_addons(TRANSACTION_METHODS)
    ]
    return render(request, "exchange/checkout.html", {"cart": cart, "buttons": [b for b in buttons if b]})


@staff_member_required
def addon_settings_view(request, slug):
    addon = get_addon(slug)
    if addon is None or addon.settings_callback is None:
        raise Http404("Unknown add-on")
    return addon.settings_callback(request)


@staff_member_required
@never_cache
@require_http_methods(["GET", "POST"])
def setup_wizard_view(request):
    addons = get_addons(TRANSACTION_METHODS)
    errors = []

    if request.method == "POST":
        selected = request.POST.getlist(WIZARD_METHODS_FIELD)
        for addon in addons:
            if addon.slug in selected:
                errors = apply_filters(f"save_{addon.slug}_wizard_settings", errors, request) or errors
        if not errors:
            messages.success(request, _("Settings saved."))
            return redirect("exchange:setup")
        logger.info("Setup wizard rejected: %s", "; ".join(errors))

    sections = [mark_safe(apply_filters(f"print_{addon.slug}_wizard_settings", "", request)) for addon in addons]
    ctx = {
        "sections": sections,
        "errors": errors,
        "submitted_field": WIZARD_SUBMITTED_FIELD,
    }
    return render(request, "exchange/setup_wizard.html", ctx)