from typing import Callable, List

Listener = Callable[[], None]


class ButtonClickedEvent:
    """
    Ordered list of no-argument listeners.

    Listeners are called in the order they were added. The registry does not
    catch anything a listener raises.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Remove the earliest registration of `listener`, if any."""
        for i, registered in enumerate(self._listeners):
            if registered == listener:
                del self._listeners[i]
                return

    def remove_all_listeners(self) -> None:
        self._listeners.clear()

    def invoke(self) -> None:
        # Changes made by a listener apply from the next invoke on
        for listener in list(self._listeners):
            listener()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)
