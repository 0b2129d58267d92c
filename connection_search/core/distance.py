"""Edit distance calculation and typo tolerance."""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """
    Calculate the case-insensitive Levenshtein distance between two strings.

    Insertions, deletions and substitutions all cost 1.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b
    """
    a = (a or "").lower()
    b = (b or "").lower()

    if not a:
        return len(b)
    if not b:
        return len(a)

    return Levenshtein.distance(a, b)


def max_edit_distance(query_length: int) -> int:
    """
    Number of typos tolerated for a query of the given length.

    Shorter queries allow fewer typos.
    """
    if query_length <= 2:
        return 0
    if query_length <= 4:
        return 1
    if query_length <= 8:
        return 2
    return 3
