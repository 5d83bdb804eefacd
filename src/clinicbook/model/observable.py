"""
Observable Sequences
====================
Live sequences the display layer can watch without knowing about the model.

Why is this file needed?
------------------------
1. Reactivity: The views (patients, appointments, bills) must re-render when
   the backing collection changes or when a filter is applied.
2. Decoupling: The model stays free of any GUI toolkit. Listeners are plain
   callables; the Qt bridge in `clinicbook.app.state` re-emits them as
   Qt signals.

Classes:
    ObservableList: A mutable list that notifies listeners on every change.
    FilteredList: A read-only, predicate-filtered view of an ObservableList.
"""
from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar


T = TypeVar("T")

Listener = Callable[[], None]
# None means "show all"
Predicate = Optional[Callable[[T], bool]]


class ObservableList(Generic[T]):
    """A list wrapper that calls its listeners after every mutation."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = list(items)
        self._listeners: List[Listener] = []

    # --- Observation ---

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # --- Read access ---

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObservableList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"

    # --- Mutation ---

    def append(self, item: T) -> None:
        self._items.append(item)
        self._notify()

    def remove(self, item: T) -> None:
        """Removes the first equal item. Raises ValueError if absent."""
        self._items.remove(item)
        self._notify()

    def replace(self, target: T, edited: T) -> None:
        """Replaces the first item equal to `target`, keeping its position."""
        i = self._items.index(target)
        self._items[i] = edited
        self._notify()

    def set_all(self, items: Iterable[T]) -> None:
        """Replaces the whole content with a single notification."""
        self._items = list(items)
        self._notify()

    def sort(self, key: Callable[[T], object], reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)
        self._notify()


class FilteredList(Generic[T]):
    """
    Read-only view over an ObservableList, showing only the items accepted
    by the current predicate. It follows its source automatically.
    """

    def __init__(self, source: ObservableList[T], predicate: Predicate = None) -> None:
        self._source = source
        self._predicate: Predicate = predicate
        self._visible: List[T] = []
        self._listeners: List[Listener] = []
        self._refresh()
        source.subscribe(self._on_source_changed)

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    def set_predicate(self, predicate: Predicate) -> None:
        self._predicate = predicate
        self._refresh()
        self._notify()

    def shows_all(self) -> bool:
        return self._predicate is None

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _on_source_changed(self) -> None:
        self._refresh()
        self._notify()

    def _refresh(self) -> None:
        if self._predicate is None:
            self._visible = list(self._source)
        else:
            self._visible = [item for item in self._source if self._predicate(item)]

    def __len__(self) -> int:
        return len(self._visible)

    def __iter__(self) -> Iterator[T]:
        return iter(self._visible)

    def __getitem__(self, index: int) -> T:
        return self._visible[index]

    def __contains__(self, item: object) -> bool:
        return item in self._visible

    def __repr__(self) -> str:
        return f"FilteredList({self._visible!r})"
