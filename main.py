import logging
import sys
from typing import List

from pythagoras.bootstrap import create_app
from pythagoras.config import LOG_LEVEL
from pythagoras.input import read_keypress
from pythagoras.loop import run_game


def clear_screen():
    sys.stdout.write("\033[H\033[J")
    sys.stdout.flush()


def render_lines(lines: List[str]):
    clear_screen()
    sys.stdout.write("\n".join(lines) + "\n")
    sys.stdout.flush()


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        filename="pythagoras.log",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx = create_app()
    try:
        run_game(ctx.session, read_keypress, render_lines)
    except KeyboardInterrupt:
        pass
    clear_screen()


if __name__ == "__main__":
    main()
