"""The button page and the endpoint it calls.

Routes
------
GET /            HTML page; clicking the button calls /run-script
GET /run-script  Runs the full refresh pass and returns the log (text/plain)

``/run-script`` holds the response open for the whole pass, roughly one
second per link.  Concurrent calls run independent passes.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from refresher.refresh import run_refresh

router = APIRouter()

INDEX_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Streamtape Refresher</title>
    <style>
        body { font-family: system-ui, sans-serif; line-height: 1.5; padding: 20px; }
        button { font-size: 16px; padding: 10px 15px; cursor: pointer; }
        pre { background-color: #f4f4f4; padding: 15px; border-radius: 5px; white-space: pre-wrap; word-wrap: break-word; }
    </style>
</head>
<body>
    <h1>Streamtape Video Refresher</h1>
    <p>Click the button below to start refreshing all links from links.txt.</p>
    <button id="runBtn" onclick="runScript()">Start Refreshing</button>
    <hr>
    <pre id="log">Logs will appear here...</pre>

    <script>
      function runScript() {
        const btn = document.getElementById('runBtn');
        const log = document.getElementById('log');

        btn.disabled = true;
        btn.innerText = 'Running... Please wait.';
        log.innerText = 'Starting script... This may take a while. Do not close this page.';

        fetch('/run-script')
          .then(res => res.text())
          .then(data => {
            log.innerText = data;
            btn.disabled = false;
            btn.innerText = 'Start Refreshing';
          })
          .catch(err => {
            log.innerText = 'Error: ' + err.message;
            btn.disabled = false;
            btn.innerText = 'Start Refreshing';
          });
      }
    </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def index() -> HTMLResponse:
    return HTMLResponse(INDEX_HTML)


@router.get("/run-script", response_class=PlainTextResponse)
async def run_script(request: Request) -> PlainTextResponse:
    """Run one refresh pass over the configured links file.

    Always answers 200; failures only show up inside the log text.
    """
    result = await run_refresh(request.app.state.links_path)
    return PlainTextResponse(result.log)
