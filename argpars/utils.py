#!/usr/bin/env python
import sys
from typing import Tuple


def get_args() -> Tuple[str, ...]:
    """Snapshot of the arguments the process was started with."""
    return tuple(sys.argv)
