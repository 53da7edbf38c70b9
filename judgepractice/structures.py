"""Exercises on stacks and queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_EMPTY = -1
_OPENERS = {")": "(", "]": "["}


def _parse_push(parts: list[str], command: str) -> int:
    if len(parts) != 2:
        raise ValueError(f"push needs exactly one value: {command!r}")
    try:
        return int(parts[1])
    except ValueError:
        raise ValueError(f"push value is not an integer: {command!r}") from None


def run_stack_commands(commands: Iterable[str]) -> list[int]:
    """Run stack commands and return what each reporting command prints.

    Commands are ``push X``, ``pop``, ``size``, ``empty`` and ``top``;
    ``pop`` and ``top`` report -1 on an empty stack, ``empty`` reports 1 or 0.
    Unknown commands are ignored.
    """
    stack: list[int] = []
    output: list[int] = []
    for command in commands:
        parts = command.split()
        if not parts:
            continue
        name = parts[0]
        if name == "push":
            stack.append(_parse_push(parts, command))
        elif name == "top":
            output.append(stack[-1] if stack else _EMPTY)
        elif name == "size":
            output.append(len(stack))
        elif name == "pop":
            output.append(stack.pop() if stack else _EMPTY)
        elif name == "empty":
            output.append(0 if stack else 1)
    return output


def run_queue_commands(commands: Iterable[str]) -> list[int]:
    """Run queue commands and return what each reporting command prints.

    Commands are ``push X``, ``pop``, ``size``, ``empty``, ``front`` and
    ``back``; ``pop``, ``front`` and ``back`` report -1 on an empty queue.
    Unknown commands are ignored.
    """
    queue: deque[int] = deque()
    output: list[int] = []
    for command in commands:
        parts = command.split()
        if not parts:
            continue
        name = parts[0]
        if name == "push":
            queue.append(_parse_push(parts, command))
        elif name == "pop":
            output.append(queue.popleft() if queue else _EMPTY)
        elif name == "size":
            output.append(len(queue))
        elif name == "empty":
            output.append(0 if queue else 1)
        elif name == "front":
            output.append(queue[0] if queue else _EMPTY)
        elif name == "back":
            output.append(queue[-1] if queue else _EMPTY)
    return output


def josephus(people: int, step: int) -> list[int]:
    """Order in which people 1..people leave when every step-th one is removed."""
    if step < 1:
        raise ValueError("step must be at least 1")
    circle = deque(range(1, people + 1))
    order: list[int] = []
    while circle:
        circle.rotate(-(step - 1))
        order.append(circle.popleft())
    return order


def stack_sequence(targets: Sequence[int]) -> list[str] | None:
    """Push/pop operations that produce targets from pushing 1, 2, 3, ... in order.

    Returns a list of ``"+"`` and ``"-"``, or None when the sequence cannot be made.
    """
    stack: list[int] = []
    operations: list[str] = []
    current = 1
    for target in targets:
        while current <= target:
            stack.append(current)
            operations.append("+")
            current += 1
        if not stack or stack[-1] != target:
            return None
        stack.pop()
        operations.append("-")
    return operations


def printer_queue(priorities: Sequence[int], index: int) -> int:
    """Position at which the document at index is printed.

    The front document is printed only if no waiting document has a higher
    priority; otherwise it goes to the back of the queue.
    """
    if not 0 <= index < len(priorities):
        raise IndexError(f"document {index} outside 0..{len(priorities) - 1}")
    queue = deque(enumerate(priorities))
    remaining = iter(sorted(priorities, reverse=True))
    highest = next(remaining)
    printed = 0
    while queue:
        position, priority = queue.popleft()
        if priority == highest:
            printed += 1
            if position == index:
                return printed
            highest = next(remaining, highest)
        else:
            queue.append((position, priority))
    raise AssertionError("document was never printed")


def card_game(count: int) -> int:
    """Last card left after repeatedly discarding the top and moving the next under."""
    if count < 1:
        raise ValueError("count must be at least 1")
    cards = deque(range(1, count + 1))
    while len(cards) > 1:
        cards.popleft()
        cards.append(cards.popleft())
    return cards[0]


def is_balanced(sentence: str) -> bool:
    """Whether round and square brackets in sentence are properly nested."""
    stack: list[str] = []
    for ch in sentence:
        if ch in "([":
            stack.append(ch)
        elif ch in _OPENERS:
            if not stack or stack[-1] != _OPENERS[ch]:
                return False
            stack.pop()
    return not stack


def is_vps(text: str) -> bool:
    """Whether text is a valid parenthesis string."""
    if len(text) % 2:
        return False
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0