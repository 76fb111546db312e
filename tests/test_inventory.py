from __future__ import annotations

import pytest

from enigmasim.core.errors import ConfigError
from enigmasim.core.inventory import RotorInventory
from enigmasim.core.permutation import Permutation
from enigmasim.core.rotor import Rotor


@pytest.fixture
def inventory(upper):
    return RotorInventory(
        [
            Rotor.moving("I", Permutation("(AELTPHQXRU) (BKNW)", upper), "Q"),
            Rotor.fixed("Beta", Permutation("(HIX)", upper)),
            Rotor.reflector("B", Permutation("(AE) (BN)", upper)),
        ]
    )


def test_lookup(inventory):
    assert len(inventory) == 3
    assert inventory.names() == ["I", "BETA", "B"]
    assert inventory["beta"].name == "Beta"
    assert "BETA" in inventory
    assert "GAMMA" not in inventory
    assert [r.name for r in inventory] == ["I", "Beta", "B"]


def test_unknown(inventory):
    with pytest.raises(ConfigError, match="not in inventory"):
        inventory.get("GAMMA")


def test_duplicate(inventory, upper):
    with pytest.raises(ConfigError, match="more than once"):
        inventory.register(Rotor.fixed("BETA", Permutation("", upper)))


def test_empty_name(upper):
    with pytest.raises(ConfigError, match="non-empty"):
        RotorInventory([Rotor.fixed("  ", Permutation("", upper))])


def test_copy_is_independent(inventory):
    inventory["I"].set("C")
    inventory["I"].set_ring("B")

    clone = inventory.copy()
    assert clone.names() == inventory.names()
    assert clone["I"] is not inventory["I"]
    assert clone["I"].setting == 0 and clone["I"].ring == 0
    assert clone["I"].permutation is inventory["I"].permutation

    clone["I"].advance()
    assert inventory["I"].setting == 2
