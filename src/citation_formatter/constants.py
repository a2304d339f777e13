"""Project-wide constants."""

# -- GOST R 7.0.5-2008 ------------------------------------------------------
GOST_MAX_AUTHORS: int = 3
GOST_ET_AL: str = "et al."
GOST_JOURNAL_MARK: str = "//"
GOST_VOLUME_LABEL: str = "Vol."
GOST_ISSUE_LABEL: str = "No."
GOST_PAGES_LABEL: str = "P."
GOST_DOI_LABEL: str = "DOI:"

# -- APA 7th edition --------------------------------------------------------
APA_DOI_PREFIX: str = "https://doi.org/"

# -- Vancouver --------------------------------------------------------------
VANCOUVER_MAX_AUTHORS: int = 6
VANCOUVER_ET_AL: str = "et al"
VANCOUVER_DOI_PREFIX: str = "doi:"

# -- Punctuation ------------------------------------------------------------
# A segment already ending in one of these is not given another period.
TERMINAL_PUNCTUATION: tuple[str, ...] = (".", "?", "!")
