from __future__ import annotations
from typing import Iterable, List

from .ast import Instruction

def to_asm(ins: Instruction) -> str:
    """Texto ensamblador de la instrucción, p.ej. 'rlwinm r3,r4,5,0,26'."""
    return f"{ins.mnemonic} " + ",".join(str(op) for op in ins.operands())

def to_asm_lines(instructions: Iterable[Instruction]) -> List[str]:
    return [to_asm(ins) for ins in instructions]

def write_asm(instructions: Iterable[Instruction], path: str) -> None:
    lines = to_asm_lines(instructions)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
