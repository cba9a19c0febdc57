import logging

logger = logging.getLogger(__name__)


def load_plugins():
    # Adapters
    from core.register_adapters import register_adapters

    register_adapters()

    # Warm the factor table so a broken EMISSION_FACTORS_FILE fails at startup
    from services.emissions.emissions_factory import get_factor_table

    table = get_factor_table()
    logger.info("emission factor table '%s' ready (%d active)", table.name, len(table))
