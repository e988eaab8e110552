"""
Phones demo: an abstract factory building one phone of each family per
manufacturer.
"""

from .driver import run_phone_demo
from .factories import (
    FACTORY_REGISTRY,
    HTCFactory,
    NokiaFactory,
    PhoneFactory,
    SamsungFactory,
    get_factory,
)
from .products import (
    BasicPhone,
    HTCBasicPhone,
    HTCSmartphone,
    NokiaBasicPhone,
    NokiaSmartphone,
    Phone,
    SamsungBasicPhone,
    SamsungSmartphone,
    Smartphone,
)

__all__ = [
    "Phone",
    "Smartphone",
    "BasicPhone",
    "NokiaSmartphone",
    "NokiaBasicPhone",
    "SamsungSmartphone",
    "SamsungBasicPhone",
    "HTCSmartphone",
    "HTCBasicPhone",
    "PhoneFactory",
    "NokiaFactory",
    "SamsungFactory",
    "HTCFactory",
    "FACTORY_REGISTRY",
    "get_factory",
    "run_phone_demo",
]
