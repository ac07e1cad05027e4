class Observer:
    """Base class for observers. Other classes can inherit from this to listen to updates."""

    def update(self, data):
        """
        Called by a subject on every notification cycle.

        Args:
            data: The subject's current data. May be None if the subject has no data yet.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't have update() implemented.")
