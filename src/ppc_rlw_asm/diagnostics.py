'''
clase Diagnostic y helpers (línea/columna, tipos de error) + excepciones
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

# Tipos de problema que distinguen los llamadores
Kind = Literal[
    "mnemonic-not-recognized",
    "operand-syntax",
    "trailing-input",
    "unsupported-description",
    "operand-range",
]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores, advertencias y notas, con ubicación opcional (archivo, línea y columna),
    un mensaje de ayuda (pista) para orientar la corrección y el tipo de problema (kind).
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None
    kind: Optional[Kind] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None,
          kind: Kind | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file, kind)

def warning(message: str, *, line: int | None = None, col: int | None = None,
            file: str | None = None, hint: str | None = None,
            kind: Kind | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("advertencia", message, line, col, hint, file, kind)

def note(message: str, *, line: int | None = None, col: int | None = None,
         file: str | None = None, hint: str | None = None,
         kind: Kind | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo nota."""
    return Diagnostic("nota", message, line, col, hint, file, kind)

# ---- Excepciones ----

class AsmError(ValueError):
    """Error con un Diagnostic asociado (se puede capturar como ValueError)."""
    kind: Kind = "operand-syntax"

    def __init__(self, message: str, *, col: int | None = None, hint: str | None = None,
                 diagnostic: Diagnostic | None = None):
        super().__init__(message)
        if diagnostic is None:
            diagnostic = error(message, col=col, hint=hint, kind=self.kind)
        self.diagnostic = diagnostic

class ParseError(AsmError):
    """Base de los errores producidos al reconocer una línea."""

class MnemonicNotRecognized(ParseError):
    kind: Kind = "mnemonic-not-recognized"

class OperandSyntaxError(ParseError):
    kind: Kind = "operand-syntax"

class TrailingInput(ParseError):
    kind: Kind = "trailing-input"

class UnsupportedDescription(AsmError):
    kind: Kind = "unsupported-description"

_KIND_TO_EXC = {
    "mnemonic-not-recognized": MnemonicNotRecognized,
    "operand-syntax": OperandSyntaxError,
    "trailing-input": TrailingInput,
    "unsupported-description": UnsupportedDescription,
}

def to_exception(diag: Diagnostic) -> AsmError:
    """Convierte un diagnóstico de error en la excepción de su tipo."""
    exc_cls = _KIND_TO_EXC.get(diag.kind or "", AsmError)
    return exc_cls(diag.message, diagnostic=diag)
