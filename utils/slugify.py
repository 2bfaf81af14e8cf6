"""
Helpers for the human-readable tournament identifiers used in public URLs.
"""

import re

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str) -> str:
    """Convert text to a URL-friendly slug: 'Spring Open & Cup' -> 'spring-open-and-cup'."""
    slug = str(text).lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = slug.replace("&", "-and-")
    slug = re.sub(r"[^\w\-]+", "", slug, flags=re.ASCII)
    slug = re.sub(r"--+", "-", slug)
    return slug.strip("-")


def generate_tournament_slug(name: str, tournament_id=None) -> str:
    """Slug for a new tournament; the first 6 id characters keep same-named events apart."""
    base = slugify(name)
    if tournament_id:
        return f"{base}-{str(tournament_id)[:6]}"
    return base


def is_valid_slug(slug: str) -> bool:
    return bool(SLUG_PATTERN.match(slug))
