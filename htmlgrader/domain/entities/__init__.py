"""Entidades de domínio utilizadas na verificação de documentos HTML."""
from .check_result import CheckResult
from .source import FILE, URL, SourceDescriptor, SourceOutcome

__all__ = ["CheckResult", "SourceDescriptor", "SourceOutcome", "FILE", "URL"]
