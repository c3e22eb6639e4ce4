from unittest.mock import patch

from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from exchange.cart import CART_SESSION_KEY
from exchange.models import Option, Transaction
from exchange.nonces import create_nonce
from exchange.tests.utils import make_request

PREFIX = "exchange-add-on-paypal_pro"
CREDENTIALS = {
    "paypal_pro_api_username": "merchant_api1.example.com",
    "paypal_pro_api_password": "SECRETPASS",
    "paypal_pro_api_signature": "SIGNATURE",
}


class SettingsPageTests(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user("admin", password="pw", is_staff=True)
        self.client.force_login(self.admin)
        self.url = reverse("exchange:addon_settings", args=["paypal_pro"])

    def _post(self, values, nonce=None):
        if nonce is None:
            nonce = create_nonce(make_request(user=self.admin), "exchange-paypal_pro-settings")
        data = {f"{PREFIX}-{k}": v for k, v in values.items()}
        data["_nonce"] = nonce
        return self.client.post(self.url, data)

    def test_page_renders_fields(self):
        resp = self.client.get(self.url)

        self.assertEqual(resp.status_code, 200)
        self.assertTemplateUsed(resp, "paypal_pro/settings.html")
        self.assertContains(resp, f'name="{PREFIX}-paypal_pro_api_username"')
        self.assertContains(resp, f'type="password" name="{PREFIX}-paypal_pro_api_password"')
        self.assertContains(resp, f'type="password" name="{PREFIX}-paypal_pro_api_signature"')
        self.assertContains(resp, f'type="checkbox" name="{PREFIX}-paypal_pro_sandbox_mode"')
        self.assertContains(resp, 'value="Purchase"')
        self.assertContains(resp, 'name="_nonce"')

    def test_save_then_render_shows_new_values(self):
        resp = self._post({**CREDENTIALS, "paypal_pro_purchase_button_label": "Pay securely"})

        self.assertContains(resp, "Settings saved.")
        self.assertEqual(Option.objects.get(key="addon_paypal_pro").value["paypal_pro_api_username"], CREDENTIALS["paypal_pro_api_username"])

        resp = self.client.get(self.url)
        self.assertContains(resp, 'value="merchant_api1.example.com"')
        self.assertContains(resp, 'value="Pay securely"')

    def test_invalid_nonce_shows_error_and_keeps_posted_values(self):
        resp = self._post(CREDENTIALS, nonce="forged")

        self.assertContains(resp, "Error. Please try again")
        self.assertContains(resp, 'value="merchant_api1.example.com"')
        self.assertFalse(Option.objects.exists())

    def test_validation_errors_are_listed(self):
        resp = self._post({"paypal_pro_api_username": "someone"})

        self.assertContains(resp, "Please include your PayPal Pro API Password<br>Please include your PayPal Pro API Signature")
        self.assertFalse(Option.objects.exists())

    def test_staff_only(self):
        self.client.logout()
        resp = self.client.get(self.url)
        self.assertEqual(resp.status_code, 302)

    def test_unknown_addon_is_404(self):
        resp = self.client.get(reverse("exchange:addon_settings", args=["stripe"]))
        self.assertEqual(resp.status_code, 404)


class SetupWizardTests(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user("admin", password="pw", is_staff=True)
        self.client.force_login(self.admin)
        self.url = reverse("exchange:setup")

    def test_wizard_shows_paypal_pro_fields(self):
        resp = self.client.get(self.url)

        self.assertContains(resp, 'name="exchange_settings-paypal_pro_api_signature"')
        self.assertContains(resp, 'name="exchange_settings-wizard-submitted"')

    def test_wizard_saves_settings(self):
        data = {f"exchange_settings-{k}": v for k, v in CREDENTIALS.items()}
        data["exchange_settings-wizard-submitted"] = "1"
        data["exchange-transaction-methods"] = "paypal_pro"
        resp = self.client.post(self.url, data)

        self.assertRedirects(resp, self.url)
        self.assertEqual(Option.objects.get(key="addon_paypal_pro").value["paypal_pro_api_signature"], "SIGNATURE")

    def test_wizard_shows_errors(self):
        data = {
            "exchange_settings-wizard-submitted": "1",
            "exchange-transaction-methods": "paypal_pro",
        }
        resp = self.client.post(self.url, data)

        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "Please include your PayPal Pro API Username")
        self.assertFalse(Option.objects.exists())


class CheckoutTests(TestCase):
    def setUp(self):
        self.shopper = User.objects.create_user("erin", password="pw")
        self.client.force_login(self.shopper)
        self.url = reverse("exchange:checkout")

    def _set_cart(self, total):
        session = self.client.session
        session[CART_SESSION_KEY] = {"total": total, "products": {"3": {"name": "Poster", "count": 2}}}
        session.save()

    def _purchase(self):
        nonce = create_nonce(make_request(user=self.shopper), "paypal_pro-checkout")
        return self.client.post(
            self.url,
            {"exchange-transaction-method": "paypal_pro", "ite-paypal_pro-purchase-dialog-nonce": nonce},
            follow=True,
        )

    def test_button_shown_for_positive_cart(self):
        self._set_cart("19.99")
        resp = self.client.get(self.url)

        self.assertContains(resp, 'value="paypal_pro"')
        self.assertContains(resp, "ite-paypal_pro-purchase-dialog-nonce")

    def test_no_button_for_empty_cart(self):
        self._set_cart("0")
        resp = self.client.get(self.url)

        self.assertNotContains(resp, "ite-paypal_pro-purchase-dialog-nonce")

    def test_successful_purchase(self):
        self._set_cart("19.99")
        with patch("paypal_pro.hooks.do_payment", return_value={"id": "PP-777"}):
            resp = self._purchase()

        self.assertContains(resp, "Thank you for your order.")
        txn = Transaction.objects.get()
        self.assertEqual((txn.method, txn.method_id, txn.status), ("paypal_pro", "PP-777", "succeeded"))
        self.assertEqual(txn.cart_object["total"], "19.99")
        self.assertNotIn(CART_SESSION_KEY, self.client.session)

    def test_declined_purchase_keeps_cart(self):
        self._set_cart("19.99")
        with patch("paypal_pro.hooks.do_payment", side_effect=RuntimeError("Card declined")):
            resp = self._purchase()

        self.assertContains(resp, "Card declined")
        self.assertFalse(Transaction.objects.exists())
        self.assertIn(CART_SESSION_KEY, self.client.session)

    def test_unknown_method_rejected(self):
        self._set_cart("19.99")
        resp = self.client.post(self.url, {"exchange-transaction-method": "bitcoin"}, follow=True)

        self.assertContains(resp, "Please select a payment method.")
        self.assertFalse(Transaction.objects.exists())
