"""A growable min-heap of tasks ordered by duration, with an interactive front end."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

EMPTY_MESSAGE = "Priority Queue is empty!"


@dataclass(frozen=True)
class Task:
    """A named task taking ``duration`` minutes."""

    name: str
    duration: int


class TaskQueue:
    """Priority queue of tasks; the shortest duration comes out first.

    The backing capacity starts at ``capacity`` and doubles whenever it is full.
    """

    def __init__(self, capacity: int = 2) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._heap: list[Task] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, task: Task) -> None:
        """Add ``task`` and bubble it up to its place."""
        if len(self._heap) >= self._capacity:
            self._capacity *= 2
        heap = self._heap
        heap.append(task)
        i = len(heap) - 1
        while i > 0 and heap[(i - 1) // 2].duration > heap[i].duration:
            parent = (i - 1) // 2
            heap[i], heap[parent] = heap[parent], heap[i]
            i = parent

    def _valid_child(self, left: int, right: int) -> int:
        heap = self._heap
        if right >= len(heap) or heap[left].duration < heap[right].duration:
            return left
        return right

    def _heapify(self, index: int) -> None:
        heap = self._heap
        moving = heap[index]
        parent = index
        child = self._valid_child(parent * 2 + 1, parent * 2 + 2)
        while child < len(heap) and moving.duration > heap[child].duration:
            heap[parent] = heap[child]
            parent = child
            child = self._valid_child(parent * 2 + 1, parent * 2 + 2)
        heap[parent] = moving

    def extract_min(self) -> Task:
        """Remove and return the shortest task; raise IndexError when empty."""
        if not self._heap:
            raise IndexError("Heap is empty!")
        heap = self._heap
        top = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._heapify(0)
        return top

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Task]:
        """Tasks in heap storage order."""
        return iter(list(self._heap))


def format_queue(queue: TaskQueue) -> str:
    """One ``Task: name, Duration: n`` line per task, or the empty notice."""
    if not len(queue):
        return EMPTY_MESSAGE
    return "\n".join(f"Task: {task.name}, Duration: {task.duration}" for task in queue)


def main(argv: Sequence[str] | None = None) -> int:
    """Read tasks from standard input, then extract them by priority."""
    parser = argparse.ArgumentParser(
        description="Order tasks by duration with a min-heap; tasks are read from standard input."
    )
    parser.parse_args(argv)

    queue = TaskQueue()
    try:
        count = int(input("Enter the number of tasks: "))
        for number in range(1, count + 1):
            name = input(f"Enter task {number} name: ").strip("\n")
            duration = int(input(f"Enter duration for task {number} (in minutes): "))
            queue.insert(Task(name, duration))
    except (ValueError, EOFError) as error:
        print(f"\nInvalid input: {error}", file=sys.stderr)
        return 1

    print("\nPriority Queue after insertions:")
    print(format_queue(queue))

    print("\nExtracting tasks in order of priority:")
    while len(queue):
        task = queue.extract_min()
        print(f"Extracted Task: {task.name}, Duration: {task.duration}")
        print("\nPriority Queue after removal:")
        print(format_queue(queue))

    print("\nPriority Queue is now empty.")
    return 0