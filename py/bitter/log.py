from __future__ import annotations

import logging
import sys


def setup_logging(level: str = 'WARNING') -> None:
    root = logging.getLogger()
    root.handlers.clear()

    lvl = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(lvl)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(lvl)
    ch.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    root.addHandler(ch)
