from .safe_math import asin_safe, acos_safe, euclidean_modulo

__all__ = [
    "asin_safe",
    "acos_safe",
    "euclidean_modulo"
]
