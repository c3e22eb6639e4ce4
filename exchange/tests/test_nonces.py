from django.contrib.auth.models import User
from django.test import TestCase, override_settings

from exchange.nonces import create_nonce, verify_nonce

from .utils import make_request


class NonceTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user("alice", password="pw")

    def test_round_trip_for_same_user_and_action(self):
        token = create_nonce(make_request(user=self.user), "checkout")
        self.assertTrue(verify_nonce(make_request(user=self.user), token, "checkout"))

    def test_anonymous_visitors_get_working_nonces(self):
        token = create_nonce(make_request(), "checkout")
        self.assertTrue(verify_nonce(make_request(), token, "checkout"))

    def test_other_action_rejected(self):
        token = create_nonce(make_request(user=self.user), "checkout")
        self.assertFalse(verify_nonce(make_request(user=self.user), token, "settings"))

    def test_other_user_rejected(self):
        bob = User.objects.create_user("bob", password="pw")
        token = create_nonce(make_request(user=self.user), "checkout")
        self.assertFalse(verify_nonce(make_request(user=bob), token, "checkout"))

    def test_empty_and_garbage_rejected(self):
        request = make_request(user=self.user)
        self.assertFalse(verify_nonce(request, "", "checkout"))
        self.assertFalse(verify_nonce(request, None, "checkout"))
        self.assertFalse(verify_nonce(request, "not-a-token", "checkout"))

    def test_expired_nonce_rejected(self):
        token = create_nonce(make_request(user=self.user), "checkout")
        with override_settings(EXCHANGE_NONCE_LIFETIME=-1):
            self.assertFalse(verify_nonce(make_request(user=self.user), token, "checkout"))
