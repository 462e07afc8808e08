import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    Company code from a display name:
    "Apple Inc." -> "apple-inc", "  IBM " -> "ibm".
    """
    return _NON_ALNUM.sub("-", name.strip().lower()).strip("-")
