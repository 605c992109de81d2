'''
 bit-twiddling de 32 bits (u32, rotación, máscaras con numeración big-endian)
'''

from __future__ import annotations

# Máscara para 32 bits sin signo
U32_MASK = 0xFFFFFFFF

def u32(x: int) -> int:
    """Fuerza el valor al rango de 32 bits sin signo."""
    return x & U32_MASK

def rotl32(x: int, sh: int) -> int:
    """Rota x a la izquierda sh bits (sh se toma módulo 32, como el hardware)."""
    x = u32(x)
    sh &= 31
    return u32((x << sh) | (x >> ((32 - sh) & 31)))

def mask32(mb: int, me: int) -> int:
    """Máscara MASK(mb..me): unos desde el bit mb hasta el me (bit 0 = MSB).

    Si mb > me la máscara da la vuelta (unos en 0..me y en mb..31).
    """
    if not (0 <= mb <= 31 and 0 <= me <= 31):
        raise ValueError("mb y me deben estar en 0..31")
    x = U32_MASK >> mb
    y = u32(U32_MASK << (31 - me))
    if mb <= me:
        return x & y
    return x | y

def to_hex32(x: int, *, prefix: bool = True) -> str:
    """Representación hexadecimal de 32 bits (cadena), con o sin prefijo 0x."""
    s = format(u32(x), "08x")
    return ("0x" + s) if prefix else s
