"""Sequential refresh pass over a list of links.

Links are requested one at a time, in order, with a fixed pause after every
request.  Each request produces one line in the run log; the caller only sees
the log once the whole pass has finished.

Log format
----------
::

    Starting to refresh 2 videos...
    ---------------------------------------
    [200] ✅ https://streamtape.com/v/abc
    [ERROR] ❌ https://streamtape.com/v/def: <error message>
    ---------------------------------------
    🎉 All links refreshed. Success: 1, Failed: 1
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import List, Union

import httpx

from refresher.refresh.loader import load_links
from refresher.refresh.models import LinkOutcome, RunResult

PACING_DELAY_SECONDS = 1.0
REQUEST_TIMEOUT_SECONDS = 30.0

NO_LINKS_MESSAGE = "No valid links found in links.txt. Script did not run."

_RULE = "-" * 39

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/100.0.4896.127 Safari/537.36"
    )
}


async def _pause() -> None:
    await asyncio.sleep(PACING_DELAY_SECONDS)


async def _refresh_one(client: httpx.AsyncClient, link: str) -> LinkOutcome:
    """GET *link* and classify the result.  Transport failures are captured."""
    try:
        response = await client.get(link)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return LinkOutcome(link=link, error=str(exc) or type(exc).__name__)
    return LinkOutcome(link=link, status_code=response.status_code)


async def refresh_links(links: List[str]) -> RunResult:
    """Request every link in *links* and return the run log and tally.

    An empty list returns :data:`NO_LINKS_MESSAGE` without touching the
    network.  The pause after each request also follows the last link.
    """
    if not links:
        return RunResult(log=NO_LINKS_MESSAGE)

    result = RunResult()
    parts = [f"Starting to refresh {len(links)} videos...\n", f"{_RULE}\n"]
    print(f"Starting to refresh {len(links)} videos...")

    async with httpx.AsyncClient(
        headers=_DEFAULT_HEADERS,
        timeout=REQUEST_TIMEOUT_SECONDS,
        follow_redirects=True,
    ) as client:
        for link in links:
            outcome = await _refresh_one(client, link)
            line = outcome.log_line()
            print(line, file=sys.stderr if outcome.error is not None else sys.stdout)
            parts.append(line)
            result.outcomes.append(outcome)

            if outcome.ok:
                result.success_count += 1
            else:
                result.failure_count += 1

            await _pause()

    parts.append(f"{_RULE}\n")
    parts.append(
        f"🎉 All links refreshed. Success: {result.success_count}, "
        f"Failed: {result.failure_count}\n"
    )
    print("Finished.")

    result.log = "".join(parts)
    return result


async def run_refresh(links_path: Union[str, Path]) -> RunResult:
    """Load the links at *links_path* and run one full refresh pass."""
    return await refresh_links(load_links(links_path))
