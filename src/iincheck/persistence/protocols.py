"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from iincheck.core.protocols import IPersonRepository

__all__ = ["IPersonRepository"]
