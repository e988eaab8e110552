"""
Phone products, split into the Smartphone and BasicPhone families.
"""

from abc import ABC, abstractmethod


class Phone(ABC):
    @abstractmethod
    def get_name(self) -> str:
        pass


class Smartphone(Phone):
    """Family marker for smartphones."""


class BasicPhone(Phone):
    """Family marker for basic phones."""


class NokiaSmartphone(Smartphone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class NokiaBasicPhone(BasicPhone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class SamsungSmartphone(Smartphone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class SamsungBasicPhone(BasicPhone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class HTCSmartphone(Smartphone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name


class HTCBasicPhone(BasicPhone):
    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name
