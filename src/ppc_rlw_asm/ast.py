'''
dataclases del modelo (Reg, Instruction y una variante por mnemónico)
'''

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import ClassVar, Tuple, Union

# ---- Operandos ----

@dataclass(frozen=True)
class Reg:
    """Registro de propósito general 'rN' (índice nominal 0..31)."""
    num: int

    @property
    def name(self) -> str:
        return f"r{self.num}"

    def __str__(self) -> str:
        return self.name

Operand = Union[Reg, int]

# ---- Instrucciones ----

@dataclass(frozen=True)
class Instruction:
    """Base común de las variantes; cada subclase fija su mnemónico."""
    mnemonic: ClassVar[str] = ""
    canonical: ClassVar[bool] = False

    def operands(self) -> Tuple[Operand, ...]:
        """Operandos en el orden de la sintaxis ensamblador."""
        return tuple(getattr(self, f.name) for f in fields(self))

    def highlevel(self, *, with_mask: bool = False) -> str:
        from .highlevel import highlevel
        return highlevel(self, with_mask=with_mask)

# Formas canónicas (las que ejecuta el hardware)

@dataclass(frozen=True)
class Rlwinm(Instruction):
    """Rotate Left Word Immediate then AND with Mask."""
    mnemonic: ClassVar[str] = "rlwinm"
    canonical: ClassVar[bool] = True
    ra: Reg
    rs: Reg
    sh: int
    mb: int
    me: int

@dataclass(frozen=True)
class Rlwimi(Instruction):
    """Rotate Left Word Immediate then Mask Insert."""
    mnemonic: ClassVar[str] = "rlwimi"
    canonical: ClassVar[bool] = True
    ra: Reg
    rs: Reg
    sh: int
    mb: int
    me: int

@dataclass(frozen=True)
class Rlwnm(Instruction):
    """Rotate Left Word then AND with Mask."""
    mnemonic: ClassVar[str] = "rlwnm"
    canonical: ClassVar[bool] = True
    ra: Reg
    rs: Reg
    rb: Reg
    mb: int
    me: int

# Pseudomnemónicos (n = ancho del campo, b = bit inicial)

@dataclass(frozen=True)
class Extlwi(Instruction):
    mnemonic: ClassVar[str] = "extlwi"
    ra: Reg
    rs: Reg
    n: int
    b: int

@dataclass(frozen=True)
class Extrwi(Instruction):
    mnemonic: ClassVar[str] = "extrwi"
    ra: Reg
    rs: Reg
    n: int
    b: int

@dataclass(frozen=True)
class Inslwi(Instruction):
    mnemonic: ClassVar[str] = "inslwi"
    ra: Reg
    rs: Reg
    n: int
    b: int

@dataclass(frozen=True)
class Insrwi(Instruction):
    mnemonic: ClassVar[str] = "insrwi"
    ra: Reg
    rs: Reg
    n: int
    b: int

@dataclass(frozen=True)
class Rotlwi(Instruction):
    mnemonic: ClassVar[str] = "rotlwi"
    ra: Reg
    rs: Reg
    n: int

@dataclass(frozen=True)
class Rotrwi(Instruction):
    mnemonic: ClassVar[str] = "rotrwi"
    ra: Reg
    rs: Reg
    n: int

@dataclass(frozen=True)
class Slwi(Instruction):
    mnemonic: ClassVar[str] = "slwi"
    ra: Reg
    rs: Reg
    n: int

@dataclass(frozen=True)
class Srwi(Instruction):
    mnemonic: ClassVar[str] = "srwi"
    ra: Reg
    rs: Reg
    n: int

@dataclass(frozen=True)
class Clrlwi(Instruction):
    mnemonic: ClassVar[str] = "clrlwi"
    ra: Reg
    rs: Reg
    n: int

@dataclass(frozen=True)
class Clrrwi(Instruction):
    mnemonic: ClassVar[str] = "clrrwi"
    ra: Reg
    rs: Reg
    n: int

@dataclass(frozen=True)
class Clrlslwi(Instruction):
    """Orden de operandos (b, n), distinto de inslwi/insrwi."""
    mnemonic: ClassVar[str] = "clrlslwi"
    ra: Reg
    rs: Reg
    b: int
    n: int

@dataclass(frozen=True)
class Rotlw(Instruction):
    mnemonic: ClassVar[str] = "rotlw"
    ra: Reg
    rs: Reg
    rb: Reg
