"""
Minimal human keystroke counts through a chain of robot-operated keypads.

The solver never builds the literal keystroke string. Instead it costs each
Activate-terminated chunk independently: every arm is back over Activate
once a chunk has been typed, so a chunk's cost at a given depth does not
depend on what came before it. Memoizing on (depth, chunk) makes the work
linear in chain length.
"""

from __future__ import annotations

import logging

from keypad_types import Chunk, Code, Key, chunk_str
from transitions import Chain, TransitionTable, transition_table

logger = logging.getLogger(__name__)

# Literal expansions longer than this are refused
DEFAULT_MAX_EXPANSION = 100_000


class ChainSolver:
    """
    Memoized cost engine for one chain.

    Usage:
        solver = ChainSolver(build_chain(2))
        solver.solve(parse_code("029A"))  # 68
    """

    def __init__(self, chain: Chain) -> None:
        self.chain = chain
        self._tables: list[TransitionTable] = [transition_table(layout) for layout in chain.layouts]
        self._memo: dict[tuple[int, str], int] = {}
        self.hits = 0
        self.misses = 0

    @property
    def memo_size(self) -> int:
        return len(self._memo)

    def solve(self, code: Code) -> int:
        """Minimal number of human keystrokes that make the numeric keypad type code."""
        result = self.cost(0, code)
        logger.info(
            "solve: code=%s, depth=%d, presses=%d, memo=%d (hits=%d, misses=%d)",
            chunk_str(code),
            len(self.chain),
            result,
            len(self._memo),
            self.hits,
            self.misses,
        )
        return result

    def cost(self, depth: int, sequence: Chunk) -> int:
        """
        Human keystrokes needed to type sequence on the keypad at depth.

        At depth == len(chain) the sequence is pressed by the human directly,
        so its cost is its length. Otherwise each step from the current key
        to the next is costed as the cheapest of its candidate move sequences
        one level out. Both candidates are always expanded: equal-length
        orderings can differ once re-expanded further out.

        Raises:
            IndexError: If depth is outside 0..len(chain)
            KeyError: If sequence uses a key the keypad at depth does not have
        """
        if depth == len(self.chain):
            return len(sequence)
        if not 0 <= depth < len(self.chain):
            raise IndexError(f"depth {depth} outside chain of length {len(self.chain)}")

        memo_key = (depth, chunk_str(sequence))
        cached = self._memo.get(memo_key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1

        table = self._tables[depth]
        total = 0
        current = Key.ACTIVATE
        for target in sequence:
            total += min(self.cost(depth + 1, candidate) for candidate in table.candidates(current, target))
            current = target

        self._memo[memo_key] = total
        return total

    def shortest_sequence(self, code: Code, max_length: int = DEFAULT_MAX_EXPANSION) -> Chunk:
        """
        Reconstruct one literal minimal keystroke sequence for the human.

        Only practical for shallow chains; the length is checked via solve()
        first and anything over max_length is refused without expanding.

        Raises:
            ValueError: If the minimal sequence is longer than max_length
        """
        length = self.solve(code)
        if length > max_length:
            raise ValueError(
                f"Refusing to expand {chunk_str(code)!r}: {length} keystrokes exceeds "
                f"max_length={max_length} (chain length {len(self.chain)})"
            )
        return tuple(self._expand(0, code))

    def _expand(self, depth: int, sequence: Chunk) -> list[Key]:
        if depth == len(self.chain):
            return list(sequence)

        table = self._tables[depth]
        result: list[Key] = []
        current = Key.ACTIVATE
        for target in sequence:
            best = min(
                table.candidates(current, target),
                key=lambda candidate: self.cost(depth + 1, candidate),
            )
            result.extend(self._expand(depth + 1, best))
            current = target
        return result
