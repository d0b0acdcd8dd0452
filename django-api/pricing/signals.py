"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from pricing.models import PricingConfigRecord
from pricing.stores.cached_store import config_cache_key


@receiver([post_save, post_delete], sender=PricingConfigRecord)
def invalidate_pricing_config_cache(sender, instance, **kwargs):
    """Invalidate the cached config when a record is saved or deleted."""
    cache.delete(config_cache_key(instance.key))
