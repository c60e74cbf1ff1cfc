"""Unit tests for Product and CartItem construction invariants."""

import dataclasses

import pytest

from market.domain.exceptions import ValidationError
from market.domain.model.cart import CartItem
from market.domain.model.product import Product
from market.domain.model.value_objects import Money


class TestProduct:

    @pytest.mark.parametrize("price", ["0.01", "1", "75000"])
    def test_positive_price_accepted(self, price):
        product = Product(id=1, name="Laptop", price=Money.of(price))
        assert product.price == Money.of(price)

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product(id=1, name="Laptop", price=Money.of(0))

    @pytest.mark.parametrize("price", [-1, "-0.01", -75000])
    def test_negative_price_rejected(self, price):
        with pytest.raises(ValidationError):
            Product.of(1, "Laptop", price)

    def test_plain_number_price_rejected(self):
        with pytest.raises(ValidationError, match="must be Money"):
            Product(id=1, name="Laptop", price=75000)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.of(1, "   ", 100)

    def test_is_immutable(self):
        product = Product.of(1, "Laptop", 75000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.price = Money.of(1)

    def test_of_factory(self):
        product = Product.of(2, "Phone", 45000)
        assert product.id == 2
        assert product.name == "Phone"
        assert product.price == Money.of("45000")


class TestCartItem:

    def test_subtotal(self):
        item = CartItem(product=Product.of(2, "Phone", 45000), quantity=2)
        assert item.subtotal == Money.of(90000)

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError, match="must be positive"):
            CartItem(product=Product.of(1, "Laptop", 75000), quantity=quantity)

    def test_increase(self):
        item = CartItem(product=Product.of(1, "Laptop", 75000), quantity=1)
        item.increase(3)
        assert item.quantity == 4

    def test_increase_by_zero_rejected(self):
        item = CartItem(product=Product.of(1, "Laptop", 75000), quantity=1)
        with pytest.raises(ValidationError, match="must be positive"):
            item.increase(0)
        assert item.quantity == 1

    def test_fractional_increase_rejected(self):
        item = CartItem(product=Product.of(1, "Laptop", 75000), quantity=1)
        with pytest.raises(ValidationError, match="must be an integer"):
            item.increase(1.5)
        assert item.quantity == 1

    def test_copy_is_independent(self):
        item = CartItem(product=Product.of(1, "Laptop", 75000), quantity=1)
        clone = item.copy()
        clone.increase(5)
        assert item.quantity == 1
        assert clone.product is item.product
