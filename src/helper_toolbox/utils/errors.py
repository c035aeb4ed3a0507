from __future__ import annotations


class UnsupportedFormatError(ValueError):
    """A format selector (entity table, UUID version, ...) is not recognized."""
