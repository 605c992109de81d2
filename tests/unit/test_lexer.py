import pytest
from ppc_rlw_asm.lexer import (
    strip_comment, skip_ws, match_keyword, match_sep, match_register, match_immediate,
)
from ppc_rlw_asm.diagnostics import OperandSyntaxError

# --- strip_comment ---
@pytest.mark.parametrize("src, expected", [
    ("slwi r1,r2,3 # cmt", "slwi r1,r2,3"),
    ("slwi r1,r2,3 // trailing", "slwi r1,r2,3"),
    ("# full comment", ""),
    ("// full comment", ""),
    ("   rotlw r1,r2,r3   ", "rotlw r1,r2,r3"),
    ("", ""),
])
def test_strip_comment(src, expected):
    assert strip_comment(src) == expected

def test_skip_ws_and_keyword():
    assert skip_ws("  \t\nr1", 0) == 4
    assert skip_ws("r1", 0) == 0
    assert match_keyword("rlwinm r0", 0, "rlwinm") == 6
    assert match_keyword("rlwimi r0", 0, "rlwinm") is None

@pytest.mark.parametrize("src, end", [(",r1", 1), (" , r1", 3), ("\t,\n r1", 4)])
def test_match_sep(src, end):
    assert match_sep(src, 0) == end

def test_match_sep_missing():
    with pytest.raises(OperandSyntaxError) as ei:
        match_sep("r1", 0)
    assert ei.value.diagnostic.kind == "operand-syntax"

@pytest.mark.parametrize("src, value, end", [
    ("r0", 0, 2),
    ("r31,", 31, 3),
    ("r255", 255, 4),
])
def test_match_register(src, value, end):
    assert match_register(src, 0) == (value, end)

@pytest.mark.parametrize("src", ["x1", "r", "R1", "r256", " r1"])
def test_match_register_bad(src):
    with pytest.raises(OperandSyntaxError):
        match_register(src, 0)

@pytest.mark.parametrize("src, value, end", [
    ("0x10", 16, 4),
    ("0XfF", 255, 4),
    ("16", 16, 2),
    ("0", 0, 1),
    ("007,", 7, 3),
])
def test_match_immediate(src, value, end):
    assert match_immediate(src, 0) == (value, end)

@pytest.mark.parametrize("src", ["0x", "0xz", "256", "0x100", "-1", "r1"])
def test_match_immediate_bad(src):
    with pytest.raises(OperandSyntaxError):
        match_immediate(src, 0)
