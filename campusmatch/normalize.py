from typing import Iterable, List


def normalize_text(s: str) -> str:
    # Case is preserved; folding is the similarity module's job.
    return " ".join(s.strip().split())


def clean_labels(labels: Iterable[str]) -> List[str]:
    cleaned = (normalize_text(label) for label in labels)
    return [label for label in cleaned if label]


def split_labels(raw: str) -> List[str]:
    """Split a comma-separated label string, e.g. "Python, Go,," -> ["Python", "Go"]."""
    if not raw:
        return []
    return clean_labels(raw.split(","))
