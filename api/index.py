import logging
from pathlib import Path
import sys

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from brew_taste import __version__  # noqa: E402
from brew_taste.config import Settings  # noqa: E402
from brew_taste.core import handle  # noqa: E402
from brew_taste.schema import AnalyzeResponse  # noqa: E402

app = FastAPI(title="brew-taste API", version=__version__)
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(Settings.from_env().allow_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.post("/api/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
async def analyze_brew(request: Request) -> JSONResponse:
    body = await request.body()
    # The model call is blocking; keep it off the event loop.
    status_code, envelope = await run_in_threadpool(handle, body, settings=Settings.from_env())
    if status_code != 200:
        logger.info("analyze returned %s: %s", status_code, envelope.error)
    return JSONResponse(envelope.to_payload(), status_code=status_code)
