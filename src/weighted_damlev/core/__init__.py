from .engine import Number, osa_distance

__all__ = ["Number", "osa_distance"]
