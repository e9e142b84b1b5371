"""
Unit Tests for Connector, Point and Section models.
"""

import pytest

from assembly_toolkit.core.models import Connector, Point, Section


class TestConnector:
    """Tests for Connector dataclass."""

    def test_eq_when_same_label_and_pole_then_equal(self):
        """Connectors compare by value."""
        assert Connector("S", "+") == Connector("S", "+")
        assert Connector("S", "+") != Connector("S", "-")

    def test_mated_when_called_then_keeps_label(self):
        """mated() should swap only the pole."""
        assert Connector("S", "+").mated("-") == Connector("S", "-")

    def test_init_when_empty_label_then_raises_error(self):
        with pytest.raises(ValueError, match="label"):
            Connector("", "+")

    def test_init_when_empty_pole_then_raises_error(self):
        with pytest.raises(ValueError, match="pole"):
            Connector("S", "")

    def test_from_list_when_round_tripped_then_equal(self):
        con = Connector("O", "-")
        assert Connector.from_list(con.to_list()) == con


class TestSection:
    """Tests for Section dataclass."""

    @pytest.fixture
    def section(self) -> Section:
        return Section.build(
            "A",
            [Connector("S", "+"), Connector("O", "-")],
            {"weight": 2.5},
        )

    def test_has_connector_when_exposed_then_true(self, section):
        assert section.has_connector(Connector("S", "+"))
        assert not section.has_connector(Connector("S", "-"))

    def test_weight_when_present_then_returns_value(self, section):
        assert section.weight("weight") == 2.5

    def test_weight_when_absent_then_returns_default(self, section):
        assert section.weight("other") == 1.0
        assert section.weight("other", 0.25) == 0.25

    def test_init_when_negative_weight_then_raises_error(self):
        with pytest.raises(ValueError, match="non-negative"):
            Section.build("A", [Connector("S", "+")], {"weight": -1.0})

    @pytest.mark.parametrize("value", [float("nan"), float("inf")], ids=["nan", "inf"])
    def test_init_when_weight_not_finite_then_raises_error(self, value):
        with pytest.raises(ValueError, match="must be finite"):
            Section.build("A", [Connector("S", "+")], {"weight": value})

    def test_eq_when_weights_differ_then_still_equal(self, section):
        """Weights are metadata, not structure."""
        plain = Section.build("A", [Connector("S", "+"), Connector("O", "-")])
        assert plain == section
        assert hash(plain) == hash(section)

    def test_eq_when_connector_order_differs_then_not_equal(self, section):
        swapped = Section.build("A", [Connector("O", "-"), Connector("S", "+")])
        assert swapped != section

    def test_with_instance_when_copied_then_not_equal_to_template(self, section):
        """A unique copy is a different piece than its template."""
        copy = section.with_instance("7")
        assert copy != section
        assert copy.point == Point("A", "7")
        assert copy.template == section
        assert not copy.is_template
        assert section.is_template

    def test_is_degenerate_when_no_connectors_then_true(self):
        assert Section.build("X", []).is_degenerate

    def test_str_when_copy_then_shows_instance(self, section):
        assert str(section.with_instance("3")) == "A@3: S+ O-"

    def test_from_dict_when_round_tripped_then_equal(self, section):
        restored = Section.from_dict(section.to_dict())
        assert restored == section
        assert restored.weight("weight") == 2.5
