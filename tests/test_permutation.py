from __future__ import annotations

import pytest

from enigmasim.core.errors import ConfigError, RangeError
from enigmasim.core.permutation import Permutation

from conftest import UPPER

# wiring of each rotor at setting A: the image of A, B, C, ...
NAVAL_WIRINGS = {
    "I": ("(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)", "EKMFLGDQVZNTOWYHXUSPAIBRCJ"),
    "II": ("(FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT) (A) (Q)", "AJDKSIRUXBLHWTMCQGZNPYFVOE"),
    "III": ("(ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)", "BDFHJLCPRTXVZNYEIWGAKMUSQO"),
    "IV": ("(AEPLIYWCOXMRFZBSTGJQNH) (DV) (KU)", "ESOVPZJAYQUIRHXLNFTGKDCMWB"),
    "BETA": ("(ALBEVFCYODJWUGNMQTZSKPR) (HIX)", "LEYJVCNIXWPBQMDRTAKZGFUHOS"),
}


def check_perm(perm, from_alpha, to_alpha):
    assert perm.size() == len(from_alpha)
    for c, e in zip(from_alpha, to_alpha):
        assert perm.permute(c) == e, f"wrong translation of {c!r}"
        assert perm.invert(e) == c, f"wrong inverse of {e!r}"
        ci, ei = UPPER.index(c), UPPER.index(e)
        assert perm.permute(ci) == ei
        assert perm.invert(ei) == ci


def test_identity(upper):
    perm = Permutation("", upper)
    check_perm(perm, UPPER, UPPER)
    assert perm.cycles() == ""
    assert not perm.derangement()


@pytest.mark.parametrize("name", sorted(NAVAL_WIRINGS))
def test_naval_rotors(upper, name):
    cycles, wiring = NAVAL_WIRINGS[name]
    check_perm(Permutation(cycles, upper), UPPER, wiring)


def test_bijection(upper):
    perm = Permutation(NAVAL_WIRINGS["I"][0], upper)
    for i in range(upper.size()):
        assert perm.invert(perm.permute(i)) == i
        assert perm.permute(perm.invert(i)) == i


def test_cycles_may_be_glued_or_spread(upper):
    a = Permutation("(AB)(CD)", upper)
    b = Permutation("  (AB)   (CD) ", upper)
    for i in range(upper.size()):
        assert a.permute(i) == b.permute(i)
    assert a.permute("A") == "B"
    assert a.permute("D") == "C"
    assert a.permute("E") == "E"


def test_cycles_canonical_form(upper):
    perm = Permutation("(BCA) (S) (XY)", upper)
    assert perm.cycles() == "(ABC) (XY)"


def test_derangement(upper):
    reflector_b = "(AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP) (RX) (SZ) (TV)"
    assert Permutation(reflector_b, upper).derangement()
    assert not Permutation("(AB)", upper).derangement()


def test_small_alphabet():
    from enigmasim.core.alphabet import Alphabet

    perm = Permutation("(BACD)", Alphabet("ABCD"))
    assert [perm.permute(i) for i in range(4)] == [2, 0, 3, 1]
    assert [perm.invert(i) for i in range(4)] == [1, 3, 0, 2]


def test_unknown_symbol(upper):
    with pytest.raises(ConfigError, match="not in the alphabet"):
        Permutation("(AB1)", upper)


def test_overlapping_cycles(upper):
    with pytest.raises(ConfigError):
        Permutation("(AB) (BC)", upper)


def test_index_out_of_range(upper):
    perm = Permutation("(AB)", upper)
    with pytest.raises(RangeError):
        perm.permute(26)
    with pytest.raises(RangeError):
        perm.invert("!")
