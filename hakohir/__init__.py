"""Identifiers, HIR data model, body scope resolution and diagnostics for the Hako compiler."""

__version__ = "0.1.0"
__all__ = ["ids", "model", "scope", "diagnostics"]