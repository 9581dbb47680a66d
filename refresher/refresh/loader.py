"""Reads the links file and keeps only Streamtape URLs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Union

LINK_PREFIX = "https://streamtape.com"


def load_links(path: Union[str, Path]) -> List[str]:
    """Return the valid links in *path*, in file order.

    Each line is trimmed; blank lines and lines that do not start with
    :data:`LINK_PREFIX` are dropped.  A leading byte-order mark is skipped
    and undecodable bytes become U+FFFD, so they only spoil their own line.
    A missing or unreadable file is reported on stderr and yields an empty
    list, this function never raises.
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig", errors="replace")
    except FileNotFoundError:
        print(f"[links] Error: {path} file not found.", file=sys.stderr)
        return []
    except OSError as exc:
        print(f"[links] Error reading {path}: {exc}", file=sys.stderr)
        return []

    links: List[str] = []
    for line in text.split("\n"):
        candidate = line.strip()
        if candidate.startswith(LINK_PREFIX):
            links.append(candidate)
    return links
