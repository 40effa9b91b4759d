"""
Slug generation for store URLs.

A slug is derived from the store name and must be globally unique. The
base slug is tried first; on collision a random suffix is appended to the
base (never to the previous candidate) and the check is repeated.
"""
import logging
import random
import re
import string
from typing import Callable

logger = logging.getLogger(__name__)

SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 5

_WHITESPACE_RE = re.compile(r"\s+")
# ASCII word characters only: accented letters are dropped, not transliterated.
_NON_SLUG_RE = re.compile(r"[^\w-]+", re.ASCII)


def generate_slug(name: str) -> str:
    """Normalize a store name into a URL-safe slug.

    >>> generate_slug("My Café Shop!")
    'my-caf-shop'
    """
    slug = name.lower().strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    return _NON_SLUG_RE.sub("", slug)


def random_suffix(length: int = SUFFIX_LENGTH) -> str:
    return "".join(random.choices(SUFFIX_ALPHABET, k=length))


def unique_slug(
    name: str,
    slug_exists: Callable[[str], bool],
    suffix: Callable[[], str] = random_suffix,
) -> str:
    """Return a slug for ``name`` that ``slug_exists`` reports as free.

    The loop has no iteration cap. It terminates because the suffix space
    (36^5) makes repeated collisions vanishingly unlikely, which assumes
    ``slug_exists`` answers honestly: a predicate that always returns True
    never terminates. The check is not atomic with the insert that follows;
    the unique constraint on ``stores.slug`` is the real guarantee.
    """
    base = generate_slug(name)
    candidate = base
    while slug_exists(candidate):
        logger.warning("Slug '%s' already taken, retrying with a suffix", candidate)
        candidate = f"{base}-{suffix()}"
    return candidate
