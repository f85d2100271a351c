"""Compilers for writing export artifacts."""

from .compiler import Compiler
from .export_compiler import DEFAULT_EXCLUDED_CATEGORIES, ExportCompiler

__all__ = ["Compiler", "DEFAULT_EXCLUDED_CATEGORIES", "ExportCompiler"]
