from django import forms


class PurchaseDialogForm(forms.Form):
    """Card details collected by a transaction method's purchase dialog."""

    first_name = forms.CharField(max_length=100, widget=forms.TextInput(attrs={"autocomplete": "cc-given-name"}))
    last_name = forms.CharField(max_length=100, widget=forms.TextInput(attrs={"autocomplete": "cc-family-name"}))
    number = forms.CharField(max_length=19, widget=forms.TextInput(attrs={"autocomplete": "cc-number"}))
    expiration_month = forms.IntegerField(min_value=1, max_value=12)
    expiration_year = forms.IntegerField(min_value=2000)
    code = forms.CharField(max_length=4, widget=forms.PasswordInput(attrs={"autocomplete": "cc-csc"}))
