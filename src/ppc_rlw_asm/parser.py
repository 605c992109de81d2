# src/ppc_rlw_asm/parser.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .lexer import (
    strip_comment,
    skip_ws,
    match_keyword,
    match_sep,
    match_register,
    match_immediate,
)
from .ast import Instruction, Reg
from .isa import SPEC, DISPATCH_ORDER, ISpec, is_reg_field
from .regs import reg_in_range, field_in_range, FIELD_MAX
from .diagnostics import (
    Diagnostic,
    ParseError,
    MnemonicNotRecognized,
    error,
    warning,
    to_exception,
)

@dataclass(frozen=True)
class ParseResult:
    """Resultado de reconocer una línea.

    instruction es None si hubo algún error; rest es la entrada no consumida.
    """
    instruction: Optional[Instruction]
    rest: str
    diagnostics: List[Diagnostic]

    @property
    def ok(self) -> bool:
        return not any(d.severity == "error" for d in self.diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "error"]

    def unwrap(self) -> Instruction:
        """Devuelve la instrucción o lanza la excepción del primer error."""
        errs = self.errors
        if errs:
            raise to_exception(errs[0])
        assert self.instruction is not None
        return self.instruction

def _match_mnemonic(text: str, pos: int) -> Tuple[ISpec, int]:
    for mnemonic in DISPATCH_ORDER:
        end = match_keyword(text, pos, mnemonic)
        if end is not None:
            return SPEC[mnemonic], end
    head = text[pos:].split(None, 1)[0] if text[pos:].strip() else ""
    raise MnemonicNotRecognized(f"Mnemónico no reconocido: '{head}'", col=pos + 1,
                                hint="mnemónicos válidos: " + ", ".join(DISPATCH_ORDER))

def _match_operands(text: str, pos: int, ispec: ISpec) -> Tuple[dict, List[Tuple[str, int, int]], int]:
    """Reconoce los operandos de la forma del mnemónico.

    Devuelve (valores por campo, [(campo, valor, col)], posición final).
    """
    values: dict = {}
    cols: List[Tuple[str, int, int]] = []
    for i, field in enumerate(ispec.fields):
        pos = skip_ws(text, pos) if i == 0 else match_sep(text, pos)
        start = pos
        if is_reg_field(field):
            num, pos = match_register(text, pos)
            values[field] = Reg(num)
        else:
            num, pos = match_immediate(text, pos)
            values[field] = num
        cols.append((field, num, start + 1))
    return values, cols, pos

def _range_warnings(ispec: ISpec, cols: List[Tuple[str, int, int]]) -> List[Diagnostic]:
    out: List[Diagnostic] = []
    for field, num, col in cols:
        if is_reg_field(field):
            if not reg_in_range(Reg(num)):
                out.append(warning(f"{ispec.mnemonic}: registro r{num} fuera de rango", col=col,
                                   hint="registros r0..r31", kind="operand-range"))
        elif not field_in_range(num):
            out.append(warning(f"{ispec.mnemonic}: {field}={num} fuera de rango", col=col,
                               hint=f"posiciones de bit 0..{FIELD_MAX}", kind="operand-range"))
    return out

def _locate(diags: List[Diagnostic], *, line: int | None, col_offset: int,
            file: str | None) -> List[Diagnostic]:
    return [replace(d, line=line, file=file,
                    col=None if d.col is None else d.col + col_offset) for d in diags]

def parse_instruction(text: str, *, require_end: bool = False, check_ranges: bool = True,
                      line: int | None = None, filename: str | None = None,
                      col_offset: int = 0) -> ParseResult:
    """
    Reconoce una línea 'mnemónico op, op, ...' y devuelve un ParseResult.

    Reglas:
      - El mnemónico se compara literalmente (sensible a mayúsculas) en el orden de isa.DISPATCH_ORDER;
        se usa el primero que es prefijo de la línea.
      - Registros: 'r' + dígitos. Inmediatos: '0x'/'0X' + hex, o decimal. Ambos de 8 bits sin signo.
      - Separadores: ',' con espacios opcionales a ambos lados.
      - require_end: la entrada sobrante (salvo espacios) es un error 'trailing-input'.
      - check_ranges: valores > 31 generan advertencias 'operand-range' (la instrucción se devuelve igual).
    """
    diags: List[Diagnostic] = []
    try:
        ispec, pos = _match_mnemonic(text, 0)
        values, cols, pos = _match_operands(text, pos, ispec)
    except ParseError as ex:
        diags.append(ex.diagnostic)
        return ParseResult(None, text, _locate(diags, line=line, col_offset=col_offset, file=filename))

    ins = ispec.cls(**values)
    rest = text[pos:]
    if check_ranges:
        diags.extend(_range_warnings(ispec, cols))
    if require_end and rest.strip():
        diags.append(error(f"Entrada sobrante tras '{ispec.mnemonic}': '{rest.strip()}'", col=pos + 1,
                           kind="trailing-input"))
        ins = None
    return ParseResult(ins, rest, _locate(diags, line=line, col_offset=col_offset, file=filename))

def parse(text: str, *, filename: Optional[str] = None,
          check_ranges: bool = True) -> Tuple[List[Instruction], List[Diagnostic]]:
    """
    Devuelve (instructions, diagnostics) para un texto de varias líneas.

    Cada línea es independiente: se quitan comentarios ('#' o '//') y espacios,
    se saltan las vacías y el resto debe ser exactamente una instrucción.
    """
    instructions: List[Instruction] = []
    diags: List[Diagnostic] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        core = strip_comment(raw)
        if not core:
            continue
        offset = len(raw) - len(raw.lstrip())
        res = parse_instruction(core, require_end=True, check_ranges=check_ranges,
                                line=lineno, filename=filename, col_offset=offset)
        diags.extend(res.diagnostics)
        if res.instruction is not None:
            instructions.append(res.instruction)
    return instructions, diags
