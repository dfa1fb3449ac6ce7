"""
Interactive demo for the keypad chain.
Drive the outermost arm by hand and watch every keypad respond.
"""

import logging

import readchar, sys
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_chain, render_keypad
from chain_simulator import ArmFault, ChainSimulator
from chain_solver import ChainSolver
from keypad_parser import parse_code
from keypad_types import Code, Key, chunk_str
from transitions import LAYOUTS, Chain, build_chain

KEYMAP: dict[str, Key] = {
    readchar.key.UP: Key.UP,
    readchar.key.DOWN: Key.DOWN,
    readchar.key.LEFT: Key.LEFT,
    readchar.key.RIGHT: Key.RIGHT,
    "w": Key.UP,
    "s": Key.DOWN,
    "a": Key.LEFT,
    "d": Key.RIGHT,
    readchar.key.ENTER: Key.ACTIVATE,
    readchar.key.CR: Key.ACTIVATE,
    readchar.key.SPACE: Key.ACTIVATE,
}


class InteractiveDemo:
    """Interactive demo: the user is the human at the end of the chain."""

    def __init__(self, chain: Chain, target: Code | None = None) -> None:
        self.chain = chain
        self.target = target
        self.simulator = ChainSimulator(chain)
        self.optimal = ChainSolver(chain).solve(target) if target is not None else None
        self.console = Console()
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with keypads and status."""
        status = Text()

        if self.target is not None:
            status.append("Target: ", style="bold")
            status.append(f"{chunk_str(self.target)}  ")
            status.append("Best possible: ", style="bold")
            status.append(f"{self.optimal} presses\n")

        status.append("Typed: ", style="bold")
        status.append(f"{self.simulator.output_str or '-'}  ")
        status.append("Presses: ", style="bold")
        status.append(f"{self.simulator.presses}\n\n")

        status.append(Text.from_ansi(render_chain(self.chain, self.simulator.cursors)))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  Arrows / WASD - Move outermost arm\n")
        status.append("  Enter / Space - Activate\n")
        status.append("  R - Reset all arms\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Keypad Chain Interactive Demo", border_style="green")

    def attempt_press(self, key: Key) -> None:
        """Send one press through the chain, reporting what happened."""
        try:
            emitted = self.simulator.press(key)
        except ArmFault as e:
            self.status_message = f"✗ {e} - arms reset"
            self.simulator.reset()
            return

        if emitted is None:
            self.status_message = f"Pressed {key.value}"
            return

        self.status_message = f"✓ Door keypad typed {emitted.value}"
        if self.target is not None and tuple(self.simulator.output) == self.target:
            self.status_message = (
                f"✓ Code {chunk_str(self.target)} entered in {self.simulator.presses} presses "
                f"(best {self.optimal})"
            )

    def run(self) -> None:
        """Run the interactive loop."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    raw = readchar.readkey()
                    key = KEYMAP.get(raw) or KEYMAP.get(raw.lower())

                    if raw.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif raw.lower() == 'r':
                        self.simulator.reset()
                        self.status_message = "Arms reset to Activate"
                    elif key is not None:
                        self.attempt_press(key)
                    else:
                        self.status_message = f"Unknown key: {repr(raw)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


def main(robots: int, target: Code | None) -> None:
    """Run interactive demo against a chain of the given size."""
    demo = InteractiveDemo(build_chain(robots), target)
    demo.run()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - print the keypads and a solved example instead
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        for layout in LAYOUTS.values():
            print(layout.name)
            print(render_keypad(layout, highlight=Key.ACTIVATE))
            print()

        code = parse_code("029A")
        solver = ChainSolver(build_chain(2))
        print(f"{chunk_str(code)}: {chunk_str(solver.shortest_sequence(code))}")
    else:
        robots = int(sys.argv[1]) if len(sys.argv) > 1 else 2
        target = parse_code(sys.argv[2]) if len(sys.argv) > 2 else None
        main(robots, target)
