from __future__ import annotations
from typing import List

from .ast import (
    Instruction,
    Rlwinm, Rlwimi, Rlwnm,
    Extlwi, Extrwi, Inslwi, Insrwi,
    Rotlwi, Rotrwi, Slwi, Srwi, Clrlwi, Clrrwi,
    Clrlslwi, Rotlw,
)

# Sin reducción módulo 32: los valores fuera de 0..31 pasan tal cual (p.ej. extlwi con n=0 da me=-1).

def canonicalize(ins: Instruction) -> Instruction:
    """Reescribe un pseudomnemónico en su rlwinm (o rlwnm para rotlw) equivalente.

    Las formas canónicas se devuelven sin cambios.
    """
    if isinstance(ins, (Rlwinm, Rlwimi, Rlwnm)): return ins
    ra, rs = ins.ra, ins.rs

    if isinstance(ins, Inslwi): return Rlwinm(ra, rs, sh=32 - ins.b, mb=ins.b, me=ins.b + ins.n - 1)
    if isinstance(ins, Insrwi): return Rlwinm(ra, rs, sh=32 - (ins.b + ins.n), mb=ins.b, me=ins.b + ins.n - 1)
    if isinstance(ins, Extlwi): return Rlwinm(ra, rs, sh=ins.b, mb=0, me=ins.n - 1)
    if isinstance(ins, Extrwi): return Rlwinm(ra, rs, sh=ins.b + ins.n, mb=32 - ins.n, me=31)

    if isinstance(ins, Rotlwi): return Rlwinm(ra, rs, sh=ins.n, mb=0, me=31)
    if isinstance(ins, Rotrwi): return Rlwinm(ra, rs, sh=32 - ins.n, mb=0, me=31)
    if isinstance(ins, Slwi):   return Rlwinm(ra, rs, sh=ins.n, mb=0, me=31 - ins.n)
    if isinstance(ins, Srwi):   return Rlwinm(ra, rs, sh=32 - ins.n, mb=ins.n, me=31)
    if isinstance(ins, Clrlwi): return Rlwinm(ra, rs, sh=0, mb=ins.n, me=31)
    if isinstance(ins, Clrrwi): return Rlwinm(ra, rs, sh=0, mb=0, me=31 - ins.n)

    # clrlslwi ra,rs,b,n: orden (b, n)
    if isinstance(ins, Clrlslwi): return Rlwinm(ra, rs, sh=ins.n, mb=ins.b - ins.n, me=31 - ins.n)

    if isinstance(ins, Rotlw): return Rlwnm(ra, rs, ins.rb, mb=0, me=31)

    raise TypeError(f"Variante desconocida: {type(ins).__name__}")

def expand(instructions: List[Instruction]) -> List[Instruction]:
    """Canonicaliza cada instrucción de la lista (cada una es independiente)."""
    return [canonicalize(ins) for ins in instructions]
