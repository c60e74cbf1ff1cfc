"""Tests for the structlog configuration and StructlogReporter."""

import pytest
import structlog
from structlog.testing import capture_logs

from market.application.cart import Cart
from market.infrastructure.logging import StructlogReporter, configure_logging
from tests.fakes import seeded_catalog


@pytest.fixture(autouse=True)
def _reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


class TestStructlogReporter:

    def test_announce_logs_at_info(self):
        with capture_logs() as logs:
            StructlogReporter().announce("product_added", product_id=1)
        assert logs == [{"event": "product_added", "product_id": 1, "log_level": "info"}]

    def test_reject_logs_at_warning(self):
        with capture_logs() as logs:
            StructlogReporter().reject("empty_cart")
        assert logs == [{"event": "empty_cart", "log_level": "warning"}]

    def test_wired_into_cart(self):
        reporter = StructlogReporter()
        cart = Cart(seeded_catalog(), reporter)
        with capture_logs() as logs:
            cart.add_item(4, 1)
        assert [(e["event"], e["log_level"]) for e in logs] == [
            ("product_not_found", "warning"),
        ]


class TestConfigureLogging:

    def test_level_filters_info(self, capsys):
        configure_logging("WARNING")
        reporter = StructlogReporter()
        reporter.announce("product_added", product_id=1)
        reporter.reject("duplicate_product", product_id=1)

        err = capsys.readouterr().err
        assert "product_added" not in err
        assert "duplicate_product" in err
        assert "product_id=1" in err

    def test_case_insensitive_level(self, capsys):
        configure_logging("debug")
        StructlogReporter().announce("cart_cleared")
        assert "cart_cleared" in capsys.readouterr().err

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")
