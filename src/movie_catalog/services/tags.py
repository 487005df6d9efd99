"""Tag derivation and the flags computed from tags."""

TRENDING_TAG = "Trending"
FEATURED_TAGS = frozenset({"Netflix", TRENDING_TAG})


def derive_tags(
    tags: tuple[str, ...] | list[str], popularity: float | None, threshold: float
) -> list[str]:
    """Add the trending tag for popular titles and drop duplicates, keeping order."""
    derived = list(tags)
    if popularity is not None and popularity > threshold:
        derived.append(TRENDING_TAG)
    return list(dict.fromkeys(derived))


def merge_tags(existing: list[str], new: list[str]) -> list[str]:
    """Union two tag lists; existing tags keep their position."""
    return list(dict.fromkeys([*existing, *new]))


def is_featured(tags: list[str]) -> bool:
    return any(tag in FEATURED_TAGS for tag in tags)
