from django.urls import path

from pricing.handlers import AdminPricingConfigView, PricingConfigView, QuoteView

urlpatterns = [
    path("pricing", PricingConfigView.as_view(), name="pricing-config"),
    path("admin/pricing", AdminPricingConfigView.as_view(), name="admin-pricing-config"),
    path(
        "photographers/<str:photographer_id>/pricing",
        AdminPricingConfigView.as_view(),
        name="photographer-pricing-config",
    ),
    path("quotes", QuoteView.as_view(), name="quote-create"),
]
