"""Command-line entry point for the marble soccer simulation."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass

import pygame

from .game import Game, play_baseline_agent, play_no_render
from .render import play_rendered


@dataclass(frozen=True)
class Options:
    """What the command line asked for."""

    render: bool = False
    baseline_agent: bool = False


def parse_args(argv: Sequence[str] | None = None) -> Options:
    """Read --render and --agent baseline; other arguments are ignored."""
    args = list(sys.argv[1:] if argv is None else argv)
    render = False
    baseline_agent = False
    for arg, following in zip(args, [*args[1:], None]):
        if arg == "--render":
            render = True
        elif arg == "--agent" and following == "baseline":
            baseline_agent = True
    return Options(render=render, baseline_agent=baseline_agent)


def run_render(rng: random.Random | None = None) -> int:
    """Play in a window; return 1 when the display cannot be set up."""
    try:
        pygame.init()
        play_rendered(Game(rng))
    except pygame.error as exc:
        print(f"Error initializing display: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


def run_no_render(rng: random.Random | None = None) -> int:
    """Play without a display, forever."""
    play_no_render(rng)
    return 0


def run_baseline_agent(rng: random.Random | None = None) -> int:
    """Play the fixed-length game driven by the baseline agent."""
    print("Running baseline agent simulation...")
    play_baseline_agent(rng)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    options = parse_args(argv)
    rng = random.Random()
    if options.baseline_agent:
        return run_baseline_agent(rng)
    return run_render(rng) if options.render else run_no_render(rng)


if __name__ == "__main__":
    sys.exit(main())