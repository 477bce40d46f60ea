# factchecker/main.py
import logging

from fastapi import FastAPI, Body, Depends
from fastapi.middleware.cors import CORSMiddleware

from .config import load_settings
from .factcheck import FactChecker
from .models import CheckIn, CheckView

settings = load_settings()
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Real-Time Fact Checker (Gemini + Google Search grounding)")

# --- Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_CHECKER = None

def get_checker() -> FactChecker:
    global _CHECKER
    if _CHECKER is None:
        _CHECKER = FactChecker(settings)
    return _CHECKER


# --- Routes ---

@app.get("/health")
def health():
    return {"ok": True, "model": settings.MODEL_NAME, "configured": settings.has_api_key}


@app.post("/check", response_model=CheckView)
async def check(payload: CheckIn = Body(...), checker: FactChecker = Depends(get_checker)):
    """
    Fact check a headline, article link, or message.
    Failures come back as an ERROR result with the explanation mirrored into `error`.
    """
    result = await checker.check(payload.input.strip())
    return CheckView.from_result(result)
