"""Django ORM implementation of the PricingConfigStore."""

import logging
from dataclasses import replace

from django.db import transaction

from pricing.domain import ConfigScope, PricingConfig
from pricing.models import PricingConfigRecord
from pricing.stores.interfaces import PricingConfigStore

logger = logging.getLogger(__name__)


class DjangoPricingConfigStore(PricingConfigStore):
    """Database-backed pricing config store using Django ORM."""

    def get_config(self, scope: ConfigScope) -> PricingConfig | None:
        record = PricingConfigRecord.objects.filter(key=scope.key).first()
        if record is None:
            return None
        return PricingConfig.from_dict(record.config, version=record.version)

    def save_config(self, scope: ConfigScope, config: PricingConfig) -> PricingConfig:
        with transaction.atomic():
            record, created = PricingConfigRecord.objects.select_for_update().get_or_create(
                key=scope.key,
                defaults={"config": config.to_dict()},
            )
            if not created:
                record.config = config.to_dict()
                record.version += 1
                record.save(update_fields=["config", "version", "updated_at"])
        logger.info("Saved pricing config %s (version %s)", scope.key, record.version)
        return replace(config, version=record.version)

    def delete_config(self, scope: ConfigScope) -> bool:
        deleted, _ = PricingConfigRecord.objects.filter(key=scope.key).delete()
        if deleted:
            logger.info("Deleted pricing config %s", scope.key)
        return deleted > 0
