"""
Champs dérivés calculés à l'enregistrement d'un article : slug et temps de lecture.
"""

import math
import re
import unicodedata

WORDS_PER_MINUTE = 200

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")
_HTML_TAGS = re.compile(r"<[^>]*>")


def slugify(text: str) -> str:
    """
    Génère un slug : minuscules, accents retirés, espaces remplacés par un tiret unique.
    slugify(slugify(s)) == slugify(s).
    """
    value = unicodedata.normalize("NFD", text.lower())
    value = "".join(c for c in value if not unicodedata.combining(c))
    value = _NON_SLUG_CHARS.sub("", value).strip()
    value = _WHITESPACE.sub("-", value)
    value = _HYPHENS.sub("-", value)
    return value.strip("-")


def count_words(content: str) -> int:
    """Nombre de mots du contenu, balises HTML exclues."""
    return len(_HTML_TAGS.sub(" ", content).split())


def reading_time(content: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Temps de lecture estimé en minutes, jamais inférieur à 1."""
    return max(1, math.ceil(count_words(content) / words_per_minute))
