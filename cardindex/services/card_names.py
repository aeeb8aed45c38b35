"""
Card name normalization.

Display names are grouped by their normalized form, so "Lim-Dûl's Vault"
and "Lim-Dul's Vault" land in the same group. Casing is left alone; the
reducer case-folds when it builds the lookup key.
"""

import re
import unicodedata

# Characters NFD does not decompose into a base letter plus a mark.
_LIGATURES = {
    "Æ": "Ae",
    "æ": "ae",
    "Œ": "Oe",
    "œ": "oe",
}

_PUNCTUATION = {
    "‘": "'",  # left single quote
    "’": "'",  # right single quote
    "“": '"',  # left double quote
    "”": '"',  # right double quote
    "–": "-",  # en dash
    "—": "-",  # em dash
}

_WHITESPACE = re.compile(r"\s+")


def _strip_diacritics(name: str) -> str:
    decomposed = unicodedata.normalize("NFD", name)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def normalize_card_name(name: str) -> str:
    """
    Return the canonical display form of a card name.

    - Folds ligatures (Æ -> Ae)
    - Strips diacritics
    - Maps typographic quotes and dashes to ASCII
    - Collapses internal whitespace and trims the ends
    """
    for src, dst in _LIGATURES.items():
        name = name.replace(src, dst)
    name = _strip_diacritics(name)
    for src, dst in _PUNCTUATION.items():
        name = name.replace(src, dst)
    return _WHITESPACE.sub(" ", name).strip()


def card_name_key(name: str) -> str:
    """Lookup key for a normalized display name."""
    return name.lower()
