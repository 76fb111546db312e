from __future__ import annotations

import pytest

from enigmasim.core.alphabet import Alphabet
from enigmasim.session.config import read_config, load_default_config

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Enigma I with the wide reflector B, used for the AAAAA -> BDZGO vector
ENIGMA_I_CONF = """
A-Z
4 3
I MQ      (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
II ME     (FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT) (A) (Q)
III MV    (ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)
UKWB R    (AY) (BR) (CU) (DH) (EQ) (FS) (GL) (IP) (JX) (KN) (MO) (TZ) (VW)
"""

NAVAL_SETUP = "* B BETA III IV I AXLE (HQ) (EX) (IP) (TR) (BY)"
HIAWATHA_PLAIN = "FROM HIS SHOULDER HIAWATHA"
HIAWATHA_CIPHER = "QVPQS OKOIL PUBKJ ZPISF XDW"


@pytest.fixture
def upper() -> Alphabet:
    return Alphabet(UPPER)


@pytest.fixture
def naval_config():
    return load_default_config()


@pytest.fixture
def naval_machine(naval_config):
    return naval_config.build_machine()


@pytest.fixture
def enigma_i_config():
    return read_config(ENIGMA_I_CONF)
