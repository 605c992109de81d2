'''
descripción de una línea (fórmula legible) para rlwinm
'''

from __future__ import annotations

from .ast import Instruction, Rlwinm
from .diagnostics import UnsupportedDescription
from .utils import mask32, to_hex32

def highlevel(ins: Instruction, *, with_mask: bool = False) -> str:
    """Devuelve 'rA = (rS << sh) & MASK(mb..me)' para un Rlwinm.

    Con with_mask=True se añade el valor de la máscara ('  ; MASK=0x0000ffff').
    Cualquier otra variante lanza UnsupportedDescription (canonicalice antes los pseudos).
    """
    if not isinstance(ins, Rlwinm):
        raise UnsupportedDescription(f"Sin descripción para '{ins.mnemonic}'",
                                     hint="solo rlwinm; use canonicalize() con los pseudomnemónicos")
    out = f"{ins.ra} = ({ins.rs} << {ins.sh}) & MASK({ins.mb}..{ins.me})"
    if with_mask:
        out += f"  ; MASK={to_hex32(mask32(ins.mb, ins.me))}"
    return out
