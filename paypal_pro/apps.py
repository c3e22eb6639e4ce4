from django.apps import AppConfig


class PayPalProConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "paypal_pro"
    verbose_name = "PayPal Pro"

    def ready(self):
        from exchange.addons import register_addon
        from exchange.hooks import add_filter

        from . import addon_settings, hooks
        from .constants import METHOD, OPTION_KEY

        register_addon(METHOD, name="PayPal Pro", settings_callback=addon_settings.settings_view)

        add_filter(f"refund_url_for_{METHOD}", hooks.refund_url_for_paypal_pro)
        add_filter(f"do_transaction_{METHOD}", hooks.process_transaction)
        add_filter(f"get_{METHOD}_make_payment_button", hooks.make_payment_button)
        add_filter(f"transaction_status_label_{METHOD}", hooks.transaction_status_label)
        add_filter(f"{METHOD}_transaction_is_cleared_for_delivery", hooks.transaction_is_cleared_for_delivery)

        add_filter(f"storage_get_defaults_{OPTION_KEY}", addon_settings.default_settings)
        add_filter(f"print_{METHOD}_wizard_settings", addon_settings.print_wizard_settings)
        add_filter(f"save_{METHOD}_wizard_settings", addon_settings.save_wizard_settings)
