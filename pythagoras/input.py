import os
import sys

ESCAPE_SEQUENCES = {
    "[A": "UP",
    "[B": "DOWN",
    "[C": "RIGHT",
    "[D": "LEFT",
}

WINDOWS_ARROWS = {
    b"H": "UP",
    b"P": "DOWN",
    b"M": "RIGHT",
    b"K": "LEFT",
}


def read_keypress() -> str:
    """
    Read a single keypress without requiring Enter.
    Arrow keys come back as "UP"/"DOWN"/"LEFT"/"RIGHT", Escape as "ESC",
    Enter as "ENTER"; anything else is the typed character.
    """
    if os.name == "nt":
        import msvcrt
        ch = msvcrt.getch()
        if ch in (b"\x00", b"\xe0"):
            return WINDOWS_ARROWS.get(msvcrt.getch(), "")
        if ch == b"\x1b":
            return "ESC"
        if ch == b"\r":
            return "ENTER"
        return ch.decode("utf-8", errors="ignore")

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)  # cbreak: immediate input, but still handles signals
        ch = sys.stdin.read(1)
        if ch == "\x1b":
            ready, _, _ = select.select([sys.stdin], [], [], 0.05)
            if not ready:
                return "ESC"
            return ESCAPE_SEQUENCES.get(sys.stdin.read(2), "")
        if ch in ("\r", "\n"):
            return "ENTER"
        return ch
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
