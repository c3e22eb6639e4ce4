from django.urls import path

from . import views

app_name = "exchange"
urlpatterns = [
    path("checkout/", views.checkout_view, name="checkout"),
    path("setup/", views.setup_wizard_view, name="setup"),
    path("addons/<slug:slug>/settings/", views.addon_settings_view, name="addon_settings"),
]
