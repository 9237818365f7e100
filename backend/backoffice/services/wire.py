"""
Outils communs aux mappers CMS ↔ entités.

Le CMS renvoie les relations soit sous forme d'identifiant, soit sous forme
d'objet peuplé (depth=1) ; ces fonctions acceptent les deux.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def ref_id(value: Any) -> Optional[str]:
    """Identifiant d'une relation, qu'elle soit peuplée ou non."""
    if value is None:
        return None
    if isinstance(value, dict):
        value = value.get("id")
        return str(value) if value is not None else None
    return str(value)


def media_url(value: Any) -> Optional[str]:
    """URL d'un média : chaîne directe ou document média peuplé."""
    if not value:
        return None
    if isinstance(value, dict):
        return value.get("url")
    return str(value)


def parse_enum(enum_cls: Type[E], value: Any, default: E) -> E:
    """Valeur d'énumération tolérante : inconnue ou absente → valeur par défaut."""
    try:
        return enum_cls(value)
    except ValueError:
        return default


def doc_id(doc: Dict[str, Any]) -> str:
    return str(doc.get("id") or doc.get("_id") or "")


def unwrap_doc(result: Dict[str, Any]) -> Dict[str, Any]:
    """Création / mise à jour : Payload renvoie {"doc": ...} ou le document nu."""
    if isinstance(result, dict) and isinstance(result.get("doc"), dict):
        return result["doc"]
    return result


def put(wire: Dict[str, Any], data: Dict[str, Any], field: str, key: str, convert=None, partial: bool = False) -> None:
    """
    Recopie data[field] dans wire[key].
    En mode partiel, un champ absent de data n'est pas transmis au CMS.
    """
    if partial and field not in data:
        return
    value = data.get(field)
    wire[key] = convert(value) if convert is not None and value is not None else value


def enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def iso_date(value: Any) -> Optional[str]:
    """Date Python → chaîne ISO (le CMS stocke des dates ISO)."""
    if value is None:
        return None
    return value.isoformat() if hasattr(value, "isoformat") else str(value)


def date_part(value: Any) -> Optional[str]:
    """'2026-03-01T00:00:00.000Z' → '2026-03-01'."""
    if not value:
        return None
    return str(value)[:10]
