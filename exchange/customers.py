import uuid

from .models import Customer


def _generate_customer_id() -> str:
    base = f"C{uuid.uuid4().hex[:10].upper()}"
    while Customer.objects.filter(customer_id=base).exists():
        base = f"C{uuid.uuid4().hex[:10].upper()}"
    return base


def get_current_customer(request):
    """Return the Customer for the logged-in user, creating it on first use.

    Anonymous visitors have no customer record; ``None`` is returned.
    """
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    try:
        return user.exchange_customer
    except Customer.DoesNotExist:
        return Customer.objects.create(user=user, customer_id=_generate_customer_id())
