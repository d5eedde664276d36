"""A hex dumper, a path remover and integer arithmetic helpers."""

__version__ = "0.1.0"
__all__ = ["mathops", "rm", "xxd"]