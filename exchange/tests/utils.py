from django.contrib.auth.models import AnonymousUser
from django.contrib.messages import get_messages
from django.contrib.messages.storage.fallback import FallbackStorage
from django.contrib.sessions.middleware import SessionMiddleware
from django.test import RequestFactory


def make_request(data=None, user=None, method="post", path="/"):
    """A request with a session, a message store and a user attached."""
    factory = RequestFactory()
    request = getattr(factory, method)(path, data or {})
    request.user = user or AnonymousUser()
    SessionMiddleware(lambda r: None).process_request(request)
    request._messages = FallbackStorage(request)
    return request


def message_texts(request):
    return [str(m) for m in get_messages(request)]
