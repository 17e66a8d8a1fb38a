"""Lightweight logging utilities for games and debugging."""

import datetime


def log_event(message):
    """Print MESSAGE with a timestamp; continuation lines (board dumps) are indented under it."""
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    lines = str(message).splitlines() or [""]
    print(f"[{timestamp}] {lines[0]}")
    pad = " " * (len(timestamp) + 3)
    for line in lines[1:]:
        print(f"{pad}{line}")
