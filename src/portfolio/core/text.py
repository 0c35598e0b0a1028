"""Title and description helpers: URL slugs and excerpts."""

import re
import unicodedata

EXCERPT_MAX_LENGTH = 150
EXCERPT_SUFFIX = "..."
SLUG_MAX_LENGTH = 255

_NON_WORD = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[-\s_]+")


def slugify(value: str, separator: str = "-") -> str:
    """Turn a title into a lowercase, hyphen-separated URL slug.

    Accented letters are folded to ASCII ("Café" -> "cafe"), other
    punctuation is dropped and runs of whitespace, underscores or hyphens
    collapse into a single separator.

    The result is cut to SLUG_MAX_LENGTH, the width of the slug column.
    """
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = _NON_WORD.sub(" ", value.lower())
    slug = _SEPARATORS.sub(separator, value).strip(separator)
    return slug[:SLUG_MAX_LENGTH].rstrip(separator)


def make_excerpt(description: str | None) -> str:
    """Build the list-view preview of a description.

    Descriptions that fit in EXCERPT_MAX_LENGTH are returned unchanged. Longer
    ones keep their first 147 characters followed by "...", so the excerpt is
    never longer than 150 characters.
    """
    if not description:
        return ""
    if len(description) <= EXCERPT_MAX_LENGTH:
        return description
    return description[: EXCERPT_MAX_LENGTH - len(EXCERPT_SUFFIX)] + EXCERPT_SUFFIX


def with_suffix(slug: str, counter: int) -> str:
    """Disambiguated slug variant: hello-world -> hello-world-1.

    The base is shortened so the result still fits in SLUG_MAX_LENGTH.
    """
    suffix = f"-{counter}"
    return slug[: SLUG_MAX_LENGTH - len(suffix)].rstrip("-") + suffix
