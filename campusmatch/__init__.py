"""Label set similarity scoring for Campus Connect matching features."""

from .similarity import jaccard_similarity

__version__ = "0.1.0"

__all__ = ["jaccard_similarity", "__version__"]
