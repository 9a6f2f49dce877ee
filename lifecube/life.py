"""Conway's Game of Life on a toroidal grid."""

from __future__ import annotations

import argparse
import random
import sys
import time

import numpy as np

CLEAR_SCREEN = "\033[2J\033[H"

_OFFSETS = (-1, 0, 1)


class Layer:
    """One layer of cells that wraps around at its edges."""

    def __init__(self, width: int, height: int, layer_id: int = 0, ratio: float = 0.5):
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self.layer_id = layer_id
        self.ratio = ratio
        self.data = np.zeros((height, width), dtype=bool)

    def random_init(self, rng: random.Random | None = None) -> None:
        """Bring cells to life, each with probability ``ratio``.

        Cells that are already alive stay alive.
        """
        rng = rng if rng is not None else random.Random()
        alive = [rng.random() < self.ratio for _ in range(self.width * self.height)]
        self.data |= np.array(alive, dtype=bool).reshape(self.height, self.width)

    def next(self) -> np.ndarray:
        """Return the grid of the following generation without changing this one."""
        counts = sum(
            np.roll(np.roll(self.data, dy, axis=0), dx, axis=1).astype(np.int8)
            for dy in _OFFSETS
            for dx in _OFFSETS
        )
        return (counts == 3) | ((counts == 4) & self.data)

    def step(self) -> None:
        """Advance this layer by one generation."""
        self.data = self.next()

    def check(self, y: int, x: int) -> bool:
        """Return whether the cell at row ``y``, column ``x`` lives in the next generation."""
        count = sum(
            bool(self.data[(y + dy) % self.height, (x + dx) % self.width])
            for dy in _OFFSETS
            for dx in _OFFSETS
        )
        if count == 3:
            return True
        if count == 4:
            return bool(self.data[y % self.height, x % self.width])
        return False

    def render(self) -> str:
        """Draw the grid as text: '#' for a live cell, a space for a dead one."""
        return "\n".join("".join("#" if cell else " " for cell in row) for row in self.data)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="lifecube", description="Run the Game of Life in a terminal.")
    parser.add_argument("--width", type=int, default=40)
    parser.add_argument("--height", type=int, default=15)
    parser.add_argument("--generations", type=int, default=500)
    parser.add_argument("--delay", type=float, default=0.5, help="seconds between generations")
    parser.add_argument("--ratio", type=float, default=0.5, help="share of cells alive at start")
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Animate a random layer in the terminal."""
    args = _parse_args(argv)
    try:
        layer = Layer(args.width, args.height, ratio=args.ratio)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    layer.random_init(random.Random(args.seed))
    for _ in range(args.generations):
        print(layer.render())
        layer.step()
        if args.delay > 0:
            time.sleep(args.delay)
        sys.stdout.write(CLEAR_SCREEN)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())