"""Landing page that documents the API with copy-pasteable curl commands."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

_INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>NAFA MVP</title>
  <style>
    body {{ font-family: 'Courier New', monospace; background: #1a1a2e; color: #eee;
           padding: 2rem; max-width: 800px; margin: 0 auto; }}
    pre {{ background: #16213e; padding: 1rem; border-radius: 8px; overflow-x: auto; }}
    h1 {{ color: #f72585; }}
    .endpoint {{ background: #0f3460; padding: 0.5rem 1rem; margin: 0.5rem 0; border-radius: 4px; }}
    .method {{ color: #7209b7; font-weight: bold; }}
  </style>
</head>
<body>
  <h1>NAFA MVP Server</h1>
  <p>Neurodiverse App for Adventurers - Journey Planning + Sensory Annotations</p>

  <h2>API Endpoints</h2>
  <div class="endpoint">
    <span class="method">GET</span> /api/journey/{journey_id} - Get sample journey
  </div>
  <div class="endpoint">
    <span class="method">GET</span> /api/annotations - List all annotations
  </div>
  <div class="endpoint">
    <span class="method">POST</span> /api/annotation - Create new annotation
  </div>

  <h2>Try It</h2>
  <pre>
# Get the sample journey
curl {base}/api/journey/{journey_id}

# Add a sensory annotation
curl -X POST {base}/api/annotation \\
  -H "Content-Type: application/json" \\
  -d '{{"locationId":"city-center","locationName":"City Center Station","noise":7,"light":5,"crowd":8,"notes":"Busy during rush hour"}}'

# List annotations
curl {base}/api/annotations
  </pre>

  <h2>Run CLI Demo</h2>
  <pre>nafa-demo</pre>
</body>
</html>"""


def render_index(base_url: str, journey_id: str) -> str:
    return _INDEX_TEMPLATE.format(base=base_url.rstrip("/"), journey_id=journey_id)


def create_index_router(journey_id: str) -> APIRouter:
    router = APIRouter(tags=["index"])

    @router.get("/", response_class=HTMLResponse)
    @router.get("/index.html", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        return HTMLResponse(render_index(str(request.base_url), journey_id))

    return router
