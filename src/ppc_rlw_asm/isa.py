'''
tabla formal de la familia rotate-and-mask (variante, forma de operandos, título)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple, Type

from .ast import (
    Instruction,
    Rlwinm, Rlwimi, Rlwnm,
    Extlwi, Extrwi, Inslwi, Insrwi,
    Rotlwi, Rotrwi, Slwi, Srwi, Clrlwi, Clrrwi,
    Clrlslwi, Rotlw,
)

@dataclass(frozen=True)
class ISpec:
    """Especificación de un mnemónico.

    - cls: variante de Instruction que construye el parser
    - form: forma de operandos, p.ej. 'ra,rs,sh,mb,me' (los campos 'r*' son registros)
    - title: descripción de una línea
    """
    cls: Type[Instruction]
    form: str
    title: str

    @property
    def mnemonic(self) -> str:
        return self.cls.mnemonic

    @property
    def canonical(self) -> bool:
        return self.cls.canonical

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self.form.split(","))

    @property
    def arity(self) -> int:
        return len(self.fields)

def is_reg_field(name: str) -> bool:
    return name.startswith("r")

SPEC: Dict[str, ISpec] = {}

# Orden de despacho del parser: primero las formas canónicas.
# 'rotlwi' debe ir antes que 'rotlw' (prefijo).
DISPATCH_ORDER: List[str] = []

def _add(spec: ISpec):
    SPEC[spec.mnemonic] = spec
    DISPATCH_ORDER.append(spec.mnemonic)

# Canónicas
_add(ISpec(Rlwinm, "ra,rs,sh,mb,me", "Rotate Left Word Immediate then AND with Mask"))
_add(ISpec(Rlwimi, "ra,rs,sh,mb,me", "Rotate Left Word Immediate then Mask Insert"))
_add(ISpec(Rlwnm,  "ra,rs,rb,mb,me", "Rotate Left Word then AND with Mask"))

# Pseudomnemónicos
_add(ISpec(Extlwi,   "ra,rs,n,b", "Extract and Left Justify Word Immediate"))
_add(ISpec(Extrwi,   "ra,rs,n,b", "Extract and Right Justify Word Immediate"))
_add(ISpec(Rotlwi,   "ra,rs,n",   "Rotate Left Word Immediate"))
_add(ISpec(Rotrwi,   "ra,rs,n",   "Rotate Right Word Immediate"))
_add(ISpec(Slwi,     "ra,rs,n",   "Shift Left Word Immediate"))
_add(ISpec(Srwi,     "ra,rs,n",   "Shift Right Word Immediate"))
_add(ISpec(Clrlwi,   "ra,rs,n",   "Clear Left Word Immediate"))
_add(ISpec(Clrrwi,   "ra,rs,n",   "Clear Right Word Immediate"))
_add(ISpec(Clrlslwi, "ra,rs,b,n", "Clear Left and Shift Left Word Immediate"))
_add(ISpec(Rotlw,    "ra,rs,rb",  "Rotate Left Word"))
_add(ISpec(Inslwi,   "ra,rs,n,b", "Insert from Left Word Immediate"))
_add(ISpec(Insrwi,   "ra,rs,n,b", "Insert from Right Word Immediate"))

def spec(mnemonic: str) -> ISpec:
    """Devuelve la especificación de un mnemónico (sensible a mayúsculas)."""
    if mnemonic not in SPEC:
        raise KeyError(f"Instrucción desconocida: {mnemonic}")
    return SPEC[mnemonic]
