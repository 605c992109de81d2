from __future__ import annotations
import argparse, sys
from typing import List, Tuple

from .ast import Instruction, Rlwinm
from .parser import parse
from .pseudo import expand
from .writers import to_asm, write_asm
from .diagnostics import Diagnostic, note

def process_text(text: str, *, filename: str | None = None,
                 check_ranges: bool = True) -> Tuple[List[Instruction], List[Instruction], List[Diagnostic]]:
    """Parsea y canonicaliza.
    Devuelve (instrucciones, canónicas, diagnostics)."""
    instructions, diags = parse(text, filename=filename, check_ranges=check_ranges)
    return instructions, expand(instructions), diags

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="PowerPC rotate-and-mask pseudomnemonic canonicalizer")
    ap.add_argument("source", nargs="?", help="archivo .s de entrada ('-' para stdin)")
    ap.add_argument("-e", dest="lines", action="append", default=[], metavar="LINE",
                    help="instrucción en línea (se puede repetir)")
    ap.add_argument("--canonical", action="store_true", help="imprime la forma canónica")
    ap.add_argument("--highlevel", action="store_true", help="imprime la descripción de la forma canónica")
    ap.add_argument("--no-range-check", action="store_true", help="no avisa de operandos > 31")
    ap.add_argument("--strict", action="store_true", help="las advertencias cuentan como errores")
    ap.add_argument("-o", dest="out", help="archivo de salida con las formas canónicas")
    args = ap.parse_args(argv)

    if args.source is None and not args.lines:
        ap.error("se requiere un archivo de entrada o al menos un -e LINE")

    filename = None
    if args.lines:
        text = "\n".join(args.lines)
    else:
        filename = args.source
        try:
            if args.source == "-":
                text = sys.stdin.read()
            else:
                with open(args.source, "r", encoding="utf-8") as f:
                    text = f.read()
        except OSError as ex:
            print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
            return 2

    instructions, canon, diags = process_text(text, filename=filename,
                                              check_ranges=not args.no_range_check)

    # sin opciones: línea original + descripción
    show_highlevel = args.highlevel or not args.canonical
    for ins, c in zip(instructions, canon):
        print(to_asm(ins))
        if args.canonical:
            print(f"  {to_asm(c)}")
        if show_highlevel:
            if isinstance(c, Rlwinm):
                print(f"  {c.highlevel()}")
            else:
                diags.append(note(f"Sin descripción para '{c.mnemonic}'", file=filename,
                                  kind="unsupported-description"))

    had_error = False
    for d in diags:
        # imprimimos todo; si hay error, devolvemos código 1
        print(d, file=sys.stderr)
        if d.severity == "error" or (args.strict and d.severity == "advertencia"):
            had_error = True

    if had_error:
        return 1

    if args.out:
        try:
            write_asm(canon, args.out)
        except OSError as ex:
            print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
            return 3
        print(f"OK: {len(canon)} instrucciones → {args.out}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
