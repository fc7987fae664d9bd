class NotEnumerableError(TypeError):
    """Raised when a value can neither be iterated again nor called to get a fresh iterator."""
