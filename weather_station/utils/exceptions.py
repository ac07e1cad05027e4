class ConfigError(Exception):
    """Raised when a configuration file or its content is invalid."""
    pass


class NotificationError(Exception):
    """
    Raised at the end of a notification cycle in which one or more observers failed.

    Attributes:
        failures (list): (observer, exception) pairs in notification order.
    """

    def __init__(self, failures: list) -> None:
        self.failures = list(failures)
        names = ", ".join(type(observer).__name__ for observer, _ in self.failures)
        super().__init__(f"{len(self.failures)} observer(s) failed during notification: {names}")
