__version__ = "0.1.0"

from .comparator import Comparator, get_comparator, similarity  # noqa: E402

__all__ = ["Comparator", "get_comparator", "similarity", "__version__"]
