from enum import Enum


class CitationStyle(str, Enum):
    GOST = "gost"  # GOST R 7.0.5-2008
    APA = "apa"  # APA 7th edition
    VANCOUVER = "vancouver"  # ICMJE / NLM

    @classmethod
    def resolve(cls, value: "CitationStyle | str | None") -> "CitationStyle":
        """Map any value to a style; anything unrecognised becomes GOST.

        Matching is case-sensitive: "APA" is not "apa" and resolves to GOST.
        """
        if isinstance(value, cls):
            return value
        for style in cls:
            if value == style.value:
                return style
        return cls.GOST
