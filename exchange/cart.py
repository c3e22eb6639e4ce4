from decimal import Decimal, InvalidOperation

from django.template.loader import render_to_string

from .forms import PurchaseDialogForm
from .nonces import create_nonce

CART_SESSION_KEY = "exchange_cart"


def get_cart(request) -> dict:
    cart = request.session.get(CART_SESSION_KEY) or {}
    return {"total": cart.get("total", "0"), "products": cart.get("products", {})}


def empty_cart(request) -> None:
    request.session.pop(CART_SESSION_KEY, None)


def get_cart_total(cart) -> Decimal:
    try:
        return Decimal(str((cart or {}).get("total") or "0"))
    except InvalidOperation:
        return Decimal("0")


def nonce_field_name(method: str) -> str:
    return f"ite-{method}-purchase-dialog-nonce"


def nonce_action(method: str) -> str:
    return f"{method}-checkout"


def generate_purchase_dialog(method: str, request, purchase_label: str) -> str:
    """Render the card form a transaction method shows on the checkout page."""
    form = PurchaseDialogForm(prefix=f"ite-{method}-purchase-dialog")
    ctx = {
        "method": method,
        "form": form,
        "purchase_label": purchase_label,
        "nonce_field": nonce_field_name(method),
        "nonce": create_nonce(request, nonce_action(method)),
    }
    return render_to_string("exchange/purchase_dialog.html", ctx, request=request)
