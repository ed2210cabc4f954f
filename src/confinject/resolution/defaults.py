"""Sentinel-aware decoding of declared default values."""

from __future__ import annotations

from confinject.resolution.descriptor import UNSET


class DefaultValueDecoder:
    """``None`` and ``UNSET`` mean "no default"; anything else is trimmed and kept.

    The empty string is a legitimate default and decodes to ``""``.
    """

    def decode(self, raw: str | None) -> str | None:
        if raw is None or raw == UNSET:
            return None
        return raw.strip()
