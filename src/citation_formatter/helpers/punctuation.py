"""Shared segment assembly and punctuation helpers for the style formatters."""

from citation_formatter.constants import TERMINAL_PUNCTUATION


def terminate(text: str, mark: str = ".") -> str:
    """Append ``mark`` unless ``text`` already ends with terminal punctuation."""
    if not text or text.endswith(TERMINAL_PUNCTUATION):
        return text
    return text + mark


def ensure_period(text: str) -> str:
    """Append a period unless ``text`` already ends with one."""
    return text if text.endswith(".") else text + "."


def labelled(label: str, value: str | None) -> str | None:
    """Return ``"label value"``, or None when the value is absent."""
    if value is None:
        return None
    return f"{label} {value}"


def join_segments(segments: list[str | None], separator: str = " ") -> str:
    """Join the present (non-empty) segments in order."""
    return separator.join(segment for segment in segments if segment)


def join_apa_names(names: list[str]) -> str:
    """Join APA names: "A", "A & B", "A, B, & C" (serial comma before the ampersand)."""
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} & {names[1]}"
    return ", ".join(names[:-1]) + f", & {names[-1]}"


def truncate_names(names: list[str], limit: int, et_al: str) -> list[str]:
    """Keep the first ``limit`` names, appending ``et_al`` if any were dropped."""
    if len(names) <= limit:
        return list(names)
    return list(names[:limit]) + [et_al]
