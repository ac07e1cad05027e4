import logging
import threading
from typing import Generic, List, Optional, TypeVar

from weather_station.observer import Observer
from weather_station.utils.exceptions import NotificationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseSubject(Generic[T]):
    """
    Base class for subjects. Holds an ordered registry of observers and pushes
    the current data to each of them on notify_observers().

    Notification is synchronous and runs in registration order over a snapshot
    of the registry taken at the start of the cycle, so observers may register
    or remove observers from inside update() without affecting the running cycle.

    With fail_fast=False (default) an observer that raises does not stop the
    cycle: failures are logged, collected and raised together as a
    NotificationError once every observer has been notified. With
    fail_fast=True the first exception propagates and the remaining observers
    are skipped.
    """

    def __init__(self, fail_fast: bool = False) -> None:
        self.fail_fast = fail_fast

        self._observers: List[Observer] = []
        # _observers keeps insertion order, which is the notification order.
        # The same observer may appear more than once.

        self._lock = threading.RLock()

    @property
    def current_data(self) -> Optional[T]:
        """
        The data delivered to observers on notification. Must be provided by the child class.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't have current_data implemented.")

    def register_observer(self, observer: Observer) -> None:
        """
        Append an observer to the registry. Registering the same observer twice
        makes it receive two updates per cycle.
        """
        with self._lock:
            self._observers.append(observer)
            count = len(self._observers)
        logger.info("New observer registered: %s. Total observers: %d", type(observer).__name__, count)

    def remove_observer(self, observer: Observer) -> None:
        """
        Remove the first registry entry that is this observer (identity match).
        Does nothing if the observer is not registered.
        """
        with self._lock:
            for index, registered in enumerate(self._observers):
                if registered is observer:
                    del self._observers[index]
                    break
            else:
                logger.debug("Observer %s is not registered, nothing to remove", type(observer).__name__)
                return
            count = len(self._observers)
        logger.info("Observer removed: %s. Total observers: %d", type(observer).__name__, count)

    def get_observers(self) -> List[Observer]:
        """
        Return a copy of the registry. Changes to the returned list do not affect the subject.
        """
        with self._lock:
            return list(self._observers)

    def notify_observers(self) -> None:
        observers = self.get_observers()
        data = self.current_data
        logger.info("Notifying %d observers", len(observers))

        failures = []
        for observer in observers:
            if self.fail_fast:
                observer.update(data)
                continue
            try:
                observer.update(data)
            except Exception as e:
                logger.exception("Observer %s failed to handle update", type(observer).__name__)
                failures.append((observer, e))

        if failures:
            raise NotificationError(failures)
