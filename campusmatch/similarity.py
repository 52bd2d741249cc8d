"""
Set similarity scoring for label collections.

Responsibilities:
- Compute the Jaccard index between two collections of string labels
  (skills, interests, hashtags).
- Apply one case-folding rule uniformly to both sides.

Non-Responsibilities:
- No ranking or weighting.
- No logging, caching or I/O.

Invariant:
Given identical inputs, the score is identical, lies in [0, 1] and does not
change when the two inputs are swapped.
"""

from typing import FrozenSet, Iterable


def fold_label(label: str, case_sensitive: bool = False) -> str:
    """Return the comparison form of a label.

    Case-insensitive comparison uses ``str.lower()`` (Unicode simple
    lowercase, independent of locale). ``casefold()`` is deliberately not
    used: it rewrites ``"ß"`` as ``"ss"``.
    """
    return label if case_sensitive else label.lower()


def label_set(labels: Iterable[str], case_sensitive: bool = False) -> FrozenSet[str]:
    """Distinct folded labels; order and duplicates are irrelevant."""
    return frozenset(fold_label(label, case_sensitive) for label in labels)


def jaccard_similarity(
    a: Iterable[str],
    b: Iterable[str],
    case_sensitive: bool = False,
) -> float:
    """
    Jaccard similarity coefficient for two label collections.

    Args:
        a: First collection of labels
        b: Second collection of labels
        case_sensitive: If True, labels differing only in case are distinct

    Returns:
        |A ∩ B| / |A ∪ B| as a float in [0, 1]. Two empty collections
        score 0.0, not 1.0.
    """
    set_a = label_set(a, case_sensitive)
    set_b = label_set(b, case_sensitive)
    if not set_a and not set_b:
        return 0.0

    union = len(set_a | set_b)
    if union == 0:
        return 0.0
    return len(set_a & set_b) / union
