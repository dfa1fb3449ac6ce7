"""
Step-by-step replay of human keystrokes through a keypad chain.

State is one cursor per depth (which key each arm is hovering over); a
single dispatch loop walks a press inward until it either moves an arm or
reaches the numeric keypad.
"""

from __future__ import annotations

from typing import Iterable

from keypad_types import DIRECTION_DELTAS, Key, chunk_str
from transitions import Chain


class ArmFault(ValueError):
    """An arm was driven off its keypad or over the gap."""

    def __init__(self, depth: int, message: str) -> None:
        super().__init__(f"Arm at depth {depth}: {message}")
        self.depth = depth


class ChainSimulator:
    """
    Live state of every arm in a chain.

    cursors[d] is the key the arm over chain[d] is pointing at. The human's
    presses drive the arm at the deepest index; an Activate there presses
    the key under that arm, which drives the arm one level in, and so on
    down to the numeric keypad.
    """

    def __init__(self, chain: Chain) -> None:
        self.chain = chain
        self.cursors: list[Key] = []
        self.output: list[Key] = []
        self.presses = 0
        self.reset()

    def reset(self) -> None:
        """Park every arm on Activate and clear the output."""
        self.cursors = [Key.ACTIVATE] * len(self.chain)
        self.output = []
        self.presses = 0

    @property
    def output_str(self) -> str:
        return chunk_str(self.output)

    def press(self, key: Key) -> Key | None:
        """
        Apply one human keystroke.

        Returns the key typed on the numeric keypad, if this press caused one.

        Raises:
            ArmFault: If an arm would leave its keypad or hover over the gap,
                or a non-directional key reaches a directional arm
        """
        self.presses += 1
        depth = len(self.chain) - 1

        while True:
            layout = self.chain[depth]

            if key is Key.ACTIVATE:
                pressed = self.cursors[depth]
                if depth == 0:
                    self.output.append(pressed)
                    return pressed
                key = pressed
                depth -= 1
                continue

            if not key.is_direction:
                raise ArmFault(depth, f"'{key.value}' is not a movement key")

            current = layout.position(self.cursors[depth])
            target_pos = current.offset(*DIRECTION_DELTAS[key])
            target = layout.key_at(target_pos)
            if target is None:
                raise ArmFault(
                    depth,
                    f"moving '{key.value}' from '{self.cursors[depth].value}' on keypad "
                    f"'{layout.name}' reaches ({target_pos.col}, {target_pos.row}), which has no button",
                )
            self.cursors[depth] = target
            return None

    def type(self, sequence: Iterable[Key]) -> tuple[Key, ...]:
        """Press every key in sequence; returns the keys typed on the numeric keypad."""
        typed: list[Key] = []
        for key in sequence:
            emitted = self.press(key)
            if emitted is not None:
                typed.append(emitted)
        return tuple(typed)
