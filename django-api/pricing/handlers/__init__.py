from pricing.handlers.views import AdminPricingConfigView, PricingConfigView, QuoteView

__all__ = ["AdminPricingConfigView", "PricingConfigView", "QuoteView"]
