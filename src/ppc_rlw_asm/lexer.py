from __future__ import annotations
import re
from typing import Tuple

from .diagnostics import OperandSyntaxError

COMMENT_SPLIT_RE = re.compile(r"(#|//)")

def strip_comment(line: str) -> str:
    """Remove comments starting with '#' or '//'"""
    return COMMENT_SPLIT_RE.split(line, maxsplit=1)[0].strip()

# ---- Matchers ----
# Cada matcher recibe (text, pos) y devuelve (valor, nueva_pos) o lanza OperandSyntaxError.

WS_RE  = re.compile(r"[ \t\r\n\v\f]*")
SEP_RE = re.compile(r"[ \t\r\n\v\f]*,[ \t\r\n\v\f]*")
REG_RE = re.compile(r"r([0-9]+)")
HEX_RE = re.compile(r"0[xX]([0-9a-fA-F]+)")
DEC_RE = re.compile(r"[0-9]+")
PEEK_RE = re.compile(r"[^\s,]*")

U8_MAX = 0xFF

def _col(pos: int) -> int:
    return pos + 1

def _u8(value: int, token: str, pos: int) -> int:
    if value > U8_MAX:
        raise OperandSyntaxError(f"Valor fuera del ancho de 8 bits: '{token}'", col=_col(pos),
                                 hint="los operandos caben en 0..255")
    return value

def _peek(text: str, pos: int) -> str:
    tok = PEEK_RE.match(text, pos).group(0)
    return tok or "fin de línea"

def skip_ws(text: str, pos: int) -> int:
    return WS_RE.match(text, pos).end()

def match_keyword(text: str, pos: int, keyword: str) -> int | None:
    """Devuelve la posición tras 'keyword' si el texto empieza por él (literal exacto)."""
    if text.startswith(keyword, pos):
        return pos + len(keyword)
    return None

def match_sep(text: str, pos: int) -> int:
    m = SEP_RE.match(text, pos)
    if not m:
        raise OperandSyntaxError(f"Se esperaba ',' y se encontró '{_peek(text, pos)}'", col=_col(pos),
                                 hint="faltan operandos")
    return m.end()

def match_register(text: str, pos: int) -> Tuple[int, int]:
    m = REG_RE.match(text, pos)
    if not m:
        raise OperandSyntaxError(f"Registro inválido: '{_peek(text, pos)}'", col=_col(pos),
                                 hint="use rN, p.ej. r3")
    return _u8(int(m.group(1)), m.group(0), pos), m.end()

def match_immediate(text: str, pos: int) -> Tuple[int, int]:
    # hexadecimal primero: '0x10' no debe leerse como el decimal '0'
    m = HEX_RE.match(text, pos)
    if m:
        return _u8(int(m.group(1), 16), m.group(0), pos), m.end()
    if text.startswith(("0x", "0X"), pos):
        raise OperandSyntaxError(f"Hexadecimal mal formado: '{_peek(text, pos)}'", col=_col(pos))
    m = DEC_RE.match(text, pos)
    if not m:
        raise OperandSyntaxError(f"Inmediato inválido: '{_peek(text, pos)}'", col=_col(pos),
                                 hint="decimal o hexadecimal con prefijo 0x")
    return _u8(int(m.group(0)), m.group(0), pos), m.end()
