"""
Tests for the phones demo.
"""

import pytest

from pattern_demos.phones import (
    FACTORY_REGISTRY,
    BasicPhone,
    HTCBasicPhone,
    HTCFactory,
    HTCSmartphone,
    NokiaBasicPhone,
    NokiaFactory,
    NokiaSmartphone,
    Phone,
    PhoneFactory,
    SamsungBasicPhone,
    SamsungFactory,
    SamsungSmartphone,
    Smartphone,
    get_factory,
    run_phone_demo,
)

FACTORIES = [NokiaFactory, SamsungFactory, HTCFactory]


class TestProducts:
    """Tests for phone products."""

    @pytest.mark.parametrize("phone_class", [Phone, Smartphone, BasicPhone])
    def test_abstract_phones_cannot_be_built(self, phone_class):
        with pytest.raises(TypeError):
            phone_class()

    @pytest.mark.parametrize(
        "product_class, family",
        [
            (NokiaSmartphone, Smartphone),
            (NokiaBasicPhone, BasicPhone),
            (SamsungSmartphone, Smartphone),
            (SamsungBasicPhone, BasicPhone),
            (HTCSmartphone, Smartphone),
            (HTCBasicPhone, BasicPhone),
        ],
    )
    def test_product_family(self, product_class, family):
        product = product_class("x")

        assert isinstance(product, family)
        assert isinstance(product, Phone)


class TestFactories:
    """Tests for phone factories."""

    def test_phone_factory_is_abstract(self):
        with pytest.raises(TypeError):
            PhoneFactory()

    @pytest.mark.parametrize("factory_class", FACTORIES)
    @pytest.mark.parametrize("name", ["Model X", ""])
    def test_smartphone_name_passthrough(self, factory_class, name: str):
        """Test the name comes back unmodified, empty string included."""
        phone = factory_class().create_smartphone(name)

        assert phone.get_name() == name

    @pytest.mark.parametrize("factory_class", FACTORIES)
    @pytest.mark.parametrize("name", ["Model X", ""])
    def test_basic_phone_name_passthrough(self, factory_class, name: str):
        phone = factory_class().create_basic_phone(name)

        assert phone.get_name() == name

    @pytest.mark.parametrize("factory_class", FACTORIES)
    def test_families_are_distinct(self, factory_class):
        """Test both products differ in family even with the same name."""
        factory = factory_class()
        smartphone = factory.create_smartphone("same")
        basic_phone = factory.create_basic_phone("same")

        assert isinstance(smartphone, Smartphone)
        assert not isinstance(smartphone, BasicPhone)
        assert isinstance(basic_phone, BasicPhone)
        assert not isinstance(basic_phone, Smartphone)

    @pytest.mark.parametrize(
        "factory_class, smartphone_class, basic_phone_class",
        [
            (NokiaFactory, NokiaSmartphone, NokiaBasicPhone),
            (SamsungFactory, SamsungSmartphone, SamsungBasicPhone),
            (HTCFactory, HTCSmartphone, HTCBasicPhone),
        ],
    )
    def test_manufacturer_specific_products(
        self, factory_class, smartphone_class, basic_phone_class
    ):
        factory = factory_class()

        assert type(factory.create_smartphone("a")) is smartphone_class
        assert type(factory.create_basic_phone("a")) is basic_phone_class

    def test_no_caching(self):
        factory = NokiaFactory()

        assert factory.create_smartphone("a") is not factory.create_smartphone("a")


class TestFactoryRegistry:
    """Tests for the index-to-factory mapping."""

    def test_fixed_mapping(self):
        assert FACTORY_REGISTRY == {0: NokiaFactory, 1: SamsungFactory, 2: HTCFactory}

    @pytest.mark.parametrize("index, manufacturer", [(0, "Nokia"), (1, "Samsung"), (2, "HTC")])
    def test_get_factory(self, index: int, manufacturer: str):
        factory = get_factory(index)

        assert factory.manufacturer == manufacturer

    @pytest.mark.parametrize("index", [-1, 3])
    def test_get_factory_unknown_index(self, index: int):
        with pytest.raises(ValueError, match="Unknown factory index"):
            get_factory(index)


class TestPhoneDemo:
    """Tests for the phones demo driver."""

    def test_output(self, stdout_lines, phones_output):
        """Test nine lines in Nokia, Samsung, HTC order."""
        run_phone_demo()

        lines = stdout_lines()
        assert len(lines) == 9
        assert lines == phones_output
