"""
Driver for the phones demo.
"""

import logging

from .factories import FACTORY_REGISTRY, get_factory

logger = logging.getLogger(__name__)


def run_phone_demo() -> None:
    """Build and print one smartphone and one basic phone per manufacturer."""
    for index in sorted(FACTORY_REGISTRY):
        factory = get_factory(index)
        manufacturer = factory.manufacturer
        logger.debug("Using %s for index %d", type(factory).__name__, index)

        smartphone = factory.create_smartphone(f"{manufacturer} Smartphone")
        basic_phone = factory.create_basic_phone(f"{manufacturer} Basic Phone")

        print(f"Manufacturer: {manufacturer}")
        # "Smarphone" is the established output label
        print(f"Smarphone: {smartphone.get_name()}")
        print(f"Basic phone: {basic_phone.get_name()}")
