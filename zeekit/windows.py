"""A tree of editor windows laid out in nested rows and columns."""

from __future__ import annotations

import enum
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

IdT = TypeVar("IdT", bound=Hashable)


class FlexDirection(enum.Enum):
    """The axis along which a container places its children."""

    ROW = "Row"
    COLUMN = "Column"


class CycleFocus(enum.Enum):
    """Which way to move the focus between windows."""

    NEXT = "next"
    PREVIOUS = "previous"


@dataclass(frozen=True)
class Window(Generic[IdT]):
    """A window handed to the layout callback: its content id, focus and position."""

    id: IdT
    focused: bool
    index: int

    @property
    def frame_id(self) -> int:
        """The one-based position of the window, as shown to the user."""
        return self.index + 1


@dataclass
class Container:
    """A laid out group of children placed along one direction."""

    direction: FlexDirection
    children: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class _WindowNode(Generic[IdT]):
    id: IdT

    def __str__(self) -> str:
        return f"<{self.id}/>"


@dataclass(frozen=True)
class _ContainerStart:
    direction: FlexDirection

    def __str__(self) -> str:
        return f"<Container {self.direction.value}>"


@dataclass(frozen=True)
class _ContainerEnd:
    def __str__(self) -> str:
        return "</Container>"


_Node = _WindowNode | _ContainerStart | _ContainerEnd


@dataclass(frozen=True)
class _NodeRef:
    direction: FlexDirection
    node_index: int


class WindowTree(Generic[IdT]):
    """Windows stored as a flat sequence of nodes with container markers.

    The outermost level is a row. Exactly one window is focused when the tree
    is not empty.
    """

    def __init__(self) -> None:
        self._nodes: list[_Node] = []
        self.focused_index = 0
        self.num_windows = 0

    def __len__(self) -> int:
        return self.num_windows

    def __str__(self) -> str:
        return "".join(str(node) for node in self._nodes)

    def is_empty(self) -> bool:
        """Return True when there are no windows."""
        return self.num_windows == 0

    def add(self, window_id: IdT) -> None:
        """Append a window at the outermost level and focus it."""
        self._nodes.append(_WindowNode(window_id))
        self.focused_index = self.num_windows
        self.num_windows += 1

    def close_focused(self) -> None:
        """Close the focused window, collapsing containers left with one or no child."""
        if self.is_empty():
            raise IndexError("there is no window to close")
        focused = self._find_focused_window()
        del self._nodes[focused.node_index]
        self.num_windows = max(self.num_windows - 1, 0)
        self.focused_index = max(self.focused_index - 1, 0)

        nodes = self._nodes
        node_index = 0
        while node_index < len(nodes):
            window = self._lone_child(node_index)
            if window is not None:
                nodes[node_index : node_index + 3] = [window]
            elif (
                isinstance(nodes[node_index], _ContainerStart)
                and node_index + 1 < len(nodes)
                and isinstance(nodes[node_index + 1], _ContainerEnd)
            ):
                del nodes[node_index : node_index + 2]
            else:
                node_index += 1

    def _lone_child(self, node_index: int) -> _WindowNode | None:
        window_nodes = self._nodes[node_index : node_index + 3]
        if (
            len(window_nodes) == 3
            and isinstance(window_nodes[0], _ContainerStart)
            and isinstance(window_nodes[1], _WindowNode)
            and isinstance(window_nodes[2], _ContainerEnd)
        ):
            return window_nodes[1]
        return None

    def close_all_except_focused(self) -> None:
        """Keep only the focused window."""
        if self.is_empty():
            raise IndexError("there is no window to keep")
        focused = self._nodes[self._find_focused_window().node_index]
        self._nodes = [focused]
        self.focused_index = 0
        self.num_windows = 1

    def insert_at_focused(self, window_id: IdT, direction: FlexDirection) -> None:
        """Split the focused window, placing a new one after it along ``direction``."""
        if self.is_empty():
            return
        focused = self._find_focused_window()
        self._nodes.insert(focused.node_index + 1, _WindowNode(window_id))
        if direction != focused.direction:
            self._nodes.insert(focused.node_index, _ContainerStart(direction))
            self._nodes.insert(focused.node_index + 3, _ContainerEnd())
        self.focused_index += 1
        self.num_windows += 1

    def cycle_focus(self, direction: CycleFocus) -> None:
        """Move the focus to the next or previous window, wrapping around."""
        if self.is_empty():
            return
        if direction is CycleFocus.NEXT:
            self.focused_index = (self.focused_index + 1) % self.num_windows
        else:
            self.focused_index = (
                max(self.num_windows + self.focused_index - 1, 0) % self.num_windows
            )

    def layout(self, lay_component: Callable[[Window[IdT]], Any]) -> Container:
        """Build nested containers, calling ``lay_component`` for each window in order."""
        container_stack: list[Container] = []
        container = Container(FlexDirection.ROW)
        window_index = 0
        for node in self._nodes:
            if isinstance(node, _WindowNode):
                container.children.append(
                    lay_component(
                        Window(
                            node.id,
                            window_index == self.focused_index,
                            window_index,
                        )
                    )
                )
                window_index += 1
            elif isinstance(node, _ContainerStart):
                container_stack.append(container)
                container = Container(node.direction)
            else:
                container_stack[-1].children.append(container)
                container = container_stack.pop()
        assert not container_stack
        return container

    def _windows(self) -> list[int]:
        return [i for i, node in enumerate(self._nodes) if isinstance(node, _WindowNode)]

    def get_focused(self) -> IdT | None:
        """Return the id shown in the focused window, or None when there are none."""
        positions = self._windows()
        if self.focused_index < len(positions):
            return self._nodes[positions[self.focused_index]].id
        return None

    def set_focused(self, window_id: IdT) -> None:
        """Show ``window_id`` in the focused window."""
        positions = self._windows()
        if self.focused_index < len(positions):
            self._nodes[positions[self.focused_index]] = _WindowNode(window_id)

    def _find_focused_window(self) -> _NodeRef:
        window_index = self.focused_index
        container_stack = [FlexDirection.ROW]
        for node_index, node in enumerate(self._nodes):
            if isinstance(node, _WindowNode):
                if window_index == 0:
                    return _NodeRef(container_stack[-1], node_index)
                window_index -= 1
            elif isinstance(node, _ContainerStart):
                container_stack.append(node.direction)
            else:
                container_stack.pop()
        assert len(container_stack) == 1
        return _NodeRef(FlexDirection.ROW, 0)