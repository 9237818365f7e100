import uuid


def new_id() -> str:
    """Identifiant opaque : chaîne UUID4, identique au format des autres sources."""
    return str(uuid.uuid4())
