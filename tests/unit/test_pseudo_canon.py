import pytest
from ppc_rlw_asm.parser import parse_instruction
from ppc_rlw_asm.pseudo import canonicalize, expand
from ppc_rlw_asm.ast import (
    Reg, Rlwinm, Rlwimi, Rlwnm, Extlwi, Extrwi, Inslwi, Insrwi,
    Rotlwi, Rotrwi, Slwi, Srwi, Clrlwi, Clrrwi, Clrlslwi, Rotlw,
)

R1, R2, R3 = Reg(1), Reg(2), Reg(3)

# (pseudo, (sh, mb, me))
@pytest.mark.parametrize("ins, fields", [
    (Inslwi(R1, R2, n=8, b=4),   (28, 4, 11)),
    (Insrwi(R1, R2, n=8, b=4),   (20, 4, 11)),
    (Extlwi(R1, R2, n=8, b=4),   (4, 0, 7)),
    (Extrwi(R1, R2, n=8, b=4),   (12, 24, 31)),
    (Rotlwi(R1, R2, n=5),        (5, 0, 31)),
    (Rotrwi(R1, R2, n=5),        (27, 0, 31)),
    (Slwi(R1, R2, n=5),          (5, 0, 26)),
    (Srwi(R1, R2, n=5),          (27, 5, 31)),
    (Clrlwi(R1, R2, n=5),        (0, 5, 31)),
    (Clrrwi(R1, R2, n=5),        (0, 0, 26)),
    (Clrlslwi(R1, R2, b=8, n=3), (3, 5, 28)),
])
def test_pseudo_to_rlwinm(ins, fields):
    sh, mb, me = fields
    assert canonicalize(ins) == Rlwinm(R1, R2, sh=sh, mb=mb, me=me)

def test_rotlw_to_rlwnm():
    assert canonicalize(Rotlw(R1, R2, R3)) == Rlwnm(R1, R2, R3, mb=0, me=31)

@pytest.mark.parametrize("ins", [
    Rlwinm(R1, R2, sh=16, mb=0, me=15),
    Rlwimi(R1, R2, sh=16, mb=0, me=15),
    Rlwnm(R1, R2, R3, mb=0, me=31),
])
def test_canonical_forms_unchanged(ins):
    assert canonicalize(ins) is ins

def test_original_not_mutated():
    s = Slwi(R1, R2, n=5)
    c = canonicalize(s)
    assert s == Slwi(R1, R2, n=5)
    assert c is not s and isinstance(c, Rlwinm)

def test_no_modular_reduction_out_of_range():
    # extlwi con n=0: me = -1 (el llamador es quien valida rangos)
    assert canonicalize(Extlwi(R1, R2, n=0, b=0)).me == -1
    assert canonicalize(Rotrwi(R1, R2, n=0)).sh == 32

def test_slwi_scenario_from_text():
    ins = parse_instruction("slwi r3,r4,5").unwrap()
    assert ins == Slwi(Reg(3), Reg(4), n=5)
    assert canonicalize(ins) == Rlwinm(Reg(3), Reg(4), sh=5, mb=0, me=26)

def test_rotlw_scenario_from_text():
    ins = parse_instruction("rotlw r1,r2,r3").unwrap()
    assert ins == Rotlw(R1, R2, R3)
    assert canonicalize(ins) == Rlwnm(R1, R2, R3, mb=0, me=31)

def test_clrlslwi_scenario_from_text():
    ins = parse_instruction("clrlslwi r0,r1,8,3").unwrap()
    assert ins == Clrlslwi(Reg(0), R1, b=8, n=3)
    assert canonicalize(ins) == Rlwinm(Reg(0), R1, sh=3, mb=5, me=28)

def test_expand_list():
    out = expand([Slwi(R1, R2, n=1), Rlwimi(R1, R2, sh=1, mb=2, me=3), Rotlw(R1, R2, R3)])
    assert [i.mnemonic for i in out] == ["rlwinm", "rlwimi", "rlwnm"]
