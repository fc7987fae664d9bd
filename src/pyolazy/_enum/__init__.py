from ._main import Enumerable, Enumerator

__all__ = ["Enumerable", "Enumerator"]
