"""
Author-name rendering.

Input names are "Family First [Middle ...]" strings, space-separated and
already normalised upstream. Each style wants a different initials form:

  GOST       Smith J.
  APA        Smith, J.
  Vancouver  Smith JR
"""


def split_name(raw: str) -> tuple[str, list[str]]:
    """Split a raw name into its family name and given-name tokens."""
    tokens = raw.split()
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]


def _first_initial(given: list[str]) -> str:
    return f"{given[0][0].upper()}." if given else ""


def render_gost(raw: str) -> str:
    family, given = split_name(raw)
    initial = _first_initial(given)
    return f"{family} {initial}" if initial else family


def render_apa(raw: str) -> str:
    family, given = split_name(raw)
    initial = _first_initial(given)
    return f"{family}, {initial}" if initial else family


def render_vancouver(raw: str) -> str:
    """Family name followed by every given-name initial, no periods or spaces."""
    family, given = split_name(raw)
    initials = "".join(token[0].upper() for token in given)
    return f"{family} {initials}" if initials else family
