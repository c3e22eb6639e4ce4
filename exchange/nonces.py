"""Action-scoped security tokens for Exchange forms.

Django's CSRF middleware proves a POST came from our own pages. A nonce goes
further: it is tied to one action (``paypal_pro-checkout``,
``exchange-paypal_pro-settings``) and to the user who rendered the form, and it
expires after ``EXCHANGE_NONCE_LIFETIME`` seconds.
"""

import logging

from django.conf import settings
from django.core import signing

logger = logging.getLogger(__name__)


def _signer(action: str) -> signing.TimestampSigner:
    return signing.TimestampSigner(salt=f"exchange.nonce.{action}")


def _user_token(request) -> str:
    user = getattr(request, "user", None)
    return str(getattr(user, "pk", None) or 0)


def create_nonce(request, action: str) -> str:
    return _signer(action).sign(_user_token(request))


def verify_nonce(request, token, action: str) -> bool:
    if not token:
        return False
    try:
        value = _signer(action).unsign(token, max_age=settings.EXCHANGE_NONCE_LIFETIME)
    except signing.SignatureExpired:
        logger.info("Expired nonce for action %s", action)
        return False
    except signing.BadSignature:
        return False
    return value == _user_token(request)
