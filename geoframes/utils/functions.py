"""Module for miscellaneous multi-use functions"""

__all__ = ['clear_console']

import sys


def clear_console() -> None:
    """
    Resets the attached terminal (clears the screen and moves the cursor to the
    top-left corner).

    Writes the ESC c reset sequence rather than shelling out to `clear`, which
    is considerably faster.
    """
    sys.stdout.write('\033c')
    sys.stdout.flush()
