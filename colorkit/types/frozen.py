class Frozen:
    """
    Base for immutable value objects.

    Subclasses list their fields in ``__slots__`` and assign them in
    ``__init__``, then call ``self._freeze()``; afterwards any attribute
    assignment raises ``AttributeError``.
    """
    __slots__ = ('_is_frozen',)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)
