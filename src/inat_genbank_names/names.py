"""Taxon name normalization.

Names arrive in several dialects: ``Amanita sp-S19``, ``Amanita sp. S19``
and ``Amanita sp S19`` all mean the same thing. :func:`normalize` maps them
to one canonical string used only for equality checks, never for display.
"""

from __future__ import annotations

import re

_SP_MARKER = re.compile(r"sp-|sp\.|sp\s+")
_PUNCTUATION = re.compile(r"[^\w\s]")
_CF_TOKEN = re.compile(r"(?<= )cf(?= )")
_SUBSP_TOKEN = re.compile(r"(?<= )subsp(?= )")
_WHITESPACE = re.compile(r"\s+")
_CF_TAIL = re.compile(r"\bcf\b.*", re.DOTALL)
_DIGIT = re.compile(r"\d")


def _normalize_once(name: str, cut_cf_tail: bool) -> str:
    name = _SP_MARKER.sub(" ", name)
    name = _PUNCTUATION.sub("", name)
    if cut_cf_tail:
        name = strip_cf_tail(name)
    name = _CF_TOKEN.sub("", name)
    name = _SUBSP_TOKEN.sub("", name)
    return _WHITESPACE.sub(" ", name).strip()


def normalize(name: str | None, *, cut_cf_tail: bool = False) -> str:
    """
    Canonical comparison form of a taxon name.

    Drops ``sp.``-style markers, punctuation and standalone ``cf``/``subsp``
    qualifiers, then collapses whitespace. Rules are re-applied until the
    string stops changing (removing punctuation can expose a new ``sp.``
    marker), so the result is always a fixed point.

    Args:
        name: Raw name, or None.
        cut_cf_tail: Also drop a ``cf`` token and everything after it, once
            ``sp.`` markers and punctuation are gone. See :func:`strip_cf_tail`.

    Returns:
        Normalized name; empty string for None.
    """
    if name is None:
        return ""
    current = name
    while True:
        updated = _normalize_once(current, cut_cf_tail)
        if updated == current:
            return updated
        current = updated


def is_genus_only(name: str) -> bool:
    """True when the name has no species epithet (no whitespace at all)."""
    return _WHITESPACE.search(name) is None


def strip_cf_tail(name: str) -> str:
    """Remove a ``cf`` qualifier and everything after it.

    ``Amanita cf muscaria`` becomes ``Amanita``. Used when the iNaturalist
    identification is genus-level and cannot contradict a qualified species.
    :func:`normalize` applies it after punctuation is removed, so ``cf-muscaria``
    (one word once the hyphen goes) is left alone.
    """
    return _CF_TAIL.sub("", name)


def provisional_display_name(provisional: str, normalized: str) -> str:
    """Display form of a provisional name, in GenBank's ``Genus sp. 'tag'`` style.

    Only names carrying a digit (a voucher-style tag such as ``S19``) get the
    ``sp.`` marker and quotes back; anything else is shown as entered.
    """
    if not _DIGIT.search(provisional):
        return provisional
    first, _, rest = normalized.partition(" ")
    if not rest:
        return provisional
    return f"{first} sp. '{rest}'"
