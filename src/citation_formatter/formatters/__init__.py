"""Citation style formatters."""

from citation_formatter.formatters.apa import format_apa
from citation_formatter.formatters.dispatch import format_citation
from citation_formatter.formatters.gost import format_gost
from citation_formatter.formatters.vancouver import format_vancouver

__all__ = ["format_apa", "format_citation", "format_gost", "format_vancouver"]
