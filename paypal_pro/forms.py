from django import forms
from django.utils.translation import gettext_lazy as _


class PayPalProSettingsForm(forms.Form):
    """PayPal Pro API credentials and checkout options.

    Used only to render the fields and coerce posted values; required-field
    checks happen in :meth:`PayPalProAddOn.get_form_errors` after the posted
    values have been merged over the stored ones.
    """

    paypal_pro_api_username = forms.CharField(
        label=_("API Username"),
        required=False,
        help_text=_("Your PayPal Pro API Username, found under API Access in your PayPal profile."),
    )
    paypal_pro_api_password = forms.CharField(
        label=_("API Password"),
        required=False,
        widget=forms.PasswordInput(render_value=True),
        help_text=_("The PayPal Pro API Password is found next to your API Username."),
    )
    paypal_pro_api_signature = forms.CharField(
        label=_("API Signature"),
        required=False,
        widget=forms.PasswordInput(render_value=True),
        help_text=_("The PayPal Pro API Signature is found next to your API Password."),
    )
    paypal_pro_sandbox_mode = forms.BooleanField(
        label=_("Enable PayPal Pro Sandbox Mode?"),
        required=False,
        widget=forms.CheckboxInput(attrs={"class": "show-test-mode-options"}),
        help_text=_(
            "Use this mode for testing your store. This mode will need to be disabled "
            "when the store is ready to process customer payments."
        ),
    )
    paypal_pro_purchase_button_label = forms.CharField(
        label=_("Purchase Button Label"),
        required=False,
        help_text=_("This is the text inside the button your customers will press to purchase with PayPal Pro"),
    )

    def posted_values(self, fields=None) -> dict:
        """Coerced values for the fields present in the posted data.

        Fields that were not posted are left out so they keep their stored value.
        """
        values = {}
        for name in fields or self.fields:
            field = self.fields.get(name)
            key = self.add_prefix(name)
            if field is None or key not in self.data:
                continue
            if isinstance(field, forms.BooleanField):
                # the checkbox widget turns "0" into True; to_python reads it as False
                values[name] = field.clean(self.data.get(key))
                continue
            values[name] = field.clean(field.widget.value_from_datadict(self.data, self.files, key))
        return values
