"""Explicit lifecycle around the uvicorn listener.

``RefreshServer`` can either serve in the foreground (``run``, used by the
CLI) or on a background thread (``start`` / ``stop``, used by embedding code
and the test suite)::

    with RefreshServer(port=0) as server:
        httpx.get(server.url + "/")
"""

from __future__ import annotations

import threading
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI

from refresher.api.app import create_app
from refresher.config import settings

_STARTUP_TIMEOUT = 10.0


class RefreshServer:
    """A start/stop wrapper around :class:`uvicorn.Server`."""

    def __init__(
        self,
        app: Optional[FastAPI] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
    ) -> None:
        self.app = app if app is not None else create_app()
        self.host = host if host is not None else settings.host
        self.port = port if port is not None else settings.port
        self._server = self._build_server()
        self._thread: Optional[threading.Thread] = None

    def _build_server(self) -> uvicorn.Server:
        return uvicorn.Server(
            uvicorn.Config(self.app, host=self.host, port=self.port, log_level="info")
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def started(self) -> bool:
        return self._thread is not None and self._server.started

    @property
    def url(self) -> str:
        """Base URL of the listener, with port 0 resolved to the bound port."""
        port = self.port
        if self._server.started and self._server.servers:
            sockets = self._server.servers[0].sockets
            if sockets:
                port = sockets[0].getsockname()[1]
        host = "127.0.0.1" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{port}"

    def start(self) -> None:
        """Serve on a background thread; return once connections are accepted.

        Raises:
            RuntimeError: If the server is already running or does not come
                up within the startup timeout.
        """
        if self._thread is not None:
            raise RuntimeError("Server is already running.")

        # uvicorn servers are single-use, so every start gets a fresh one.
        self._server = self._build_server()
        self._thread = threading.Thread(
            target=self._server.run, name="refresher-http", daemon=True
        )
        self._thread.start()

        deadline = time.monotonic() + _STARTUP_TIMEOUT
        while not self._server.started:
            if not self._thread.is_alive() or time.monotonic() > deadline:
                self.stop()
                raise RuntimeError(f"Server failed to start on {self.host}:{self.port}.")
            time.sleep(0.05)
        print(f"[server] Listening on {self.url}")

    def stop(self) -> None:
        """Ask the listener to exit and wait for its thread.  Safe to repeat."""
        if self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout=_STARTUP_TIMEOUT)
        self._thread = None
        print("[server] Stopped.")

    def run(self) -> None:
        """Serve in the foreground until interrupted (Ctrl+C / SIGTERM)."""
        if self._thread is not None:
            raise RuntimeError("Server is already running.")
        self._server = self._build_server()
        self._server.run()

    def __enter__(self) -> "RefreshServer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
