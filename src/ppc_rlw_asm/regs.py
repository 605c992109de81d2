'''
registros rN, validaciones de rango de campos
'''

from __future__ import annotations

from .ast import Reg
from .lexer import match_register

# 32 registros de propósito general; los campos sh/mb/me/n/b son posiciones de bit 0..31
NUM_REGS = 32
FIELD_MAX = 31

def is_reg(token: str) -> bool:
    """Indica si el token es exactamente un registro 'rN' sintácticamente válido."""
    try:
        parse_reg(token)
        return True
    except ValueError:
        return False

def parse_reg(token: str) -> Reg:
    """Devuelve el Reg del token 'rN' o lanza ValueError (no comprueba 0..31)."""
    t = token.strip()
    num, end = match_register(t, 0)
    if end != len(t):
        raise ValueError(f"Registro inválido: {token}")
    return Reg(num)

def reg_in_range(reg: Reg) -> bool:
    return 0 <= reg.num < NUM_REGS

def field_in_range(value: int) -> bool:
    return 0 <= value <= FIELD_MAX
