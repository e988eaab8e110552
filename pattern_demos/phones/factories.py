"""
Phone factories, one per manufacturer.
"""

from abc import ABC, abstractmethod

from .products import (
    BasicPhone,
    HTCBasicPhone,
    HTCSmartphone,
    NokiaBasicPhone,
    NokiaSmartphone,
    SamsungBasicPhone,
    SamsungSmartphone,
    Smartphone,
)


class PhoneFactory(ABC):
    """
    Abstract factory for a manufacturer's phones.

    Each concrete factory builds the manufacturer-specific product of both
    families. Every call returns a new product; names are not validated.
    """

    manufacturer: str = "base"

    @abstractmethod
    def create_smartphone(self, name: str) -> Smartphone:
        pass

    @abstractmethod
    def create_basic_phone(self, name: str) -> BasicPhone:
        pass


class NokiaFactory(PhoneFactory):
    manufacturer = "Nokia"

    def create_smartphone(self, name: str) -> Smartphone:
        return NokiaSmartphone(name)

    def create_basic_phone(self, name: str) -> BasicPhone:
        return NokiaBasicPhone(name)


class SamsungFactory(PhoneFactory):
    manufacturer = "Samsung"

    def create_smartphone(self, name: str) -> Smartphone:
        return SamsungSmartphone(name)

    def create_basic_phone(self, name: str) -> BasicPhone:
        return SamsungBasicPhone(name)


class HTCFactory(PhoneFactory):
    manufacturer = "HTC"

    def create_smartphone(self, name: str) -> Smartphone:
        return HTCSmartphone(name)

    def create_basic_phone(self, name: str) -> BasicPhone:
        return HTCBasicPhone(name)


# Fixed index-to-manufacturer mapping used by the driver
FACTORY_REGISTRY: dict[int, type["PhoneFactory"]] = {
    0: NokiaFactory,
    1: SamsungFactory,
    2: HTCFactory,
}


def get_factory(index: int) -> PhoneFactory:
    """Get a new factory instance by index."""
    if index not in FACTORY_REGISTRY:
        raise ValueError(f"Unknown factory index: {index}")
    return FACTORY_REGISTRY[index]()
