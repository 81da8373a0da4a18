# ============================================================
# Pick-bot FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - POST /api/chat: transcript + personality -> 4 reply options
#   - Model client selection (Ollama, OpenAI, or Echo)
#   - Health checks
# ============================================================

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError
from typing import List, Optional
from functools import lru_cache

# --- Local imports ---
from pickbot.settings import settings
from pickbot.logs import get_logger
from pickbot.personas import default_personality
from pickbot.generate import (
    GenerationRequest,
    Message,
    OptionGenerator,
    Personality,
    build_model_client,
)

logger = get_logger("pickbot.app")


# ------------------------------------------------------------
# 🔧 Generator (one per process, stateless between requests)
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_generator() -> OptionGenerator:
    model_client = build_model_client(settings)
    logger.info("Using model client %s", type(model_client).__name__)
    return OptionGenerator(
        model_client=model_client,
        temperature=settings.TEMPERATURE,
        max_tokens=settings.MAX_TOKENS,
        timeout=settings.MODEL_TIMEOUT_S,
    )


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Pick-bot API", version="0.1")


class BadRequest(Exception):
    """Caller contract violation; reported as 400 with an `error` body."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@app.exception_handler(BadRequest)
async def bad_request_handler(request: Request, exc: BadRequest):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"error": exc.message})


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    # clients also send id / timestamp / options; those are ignored
    model_config = ConfigDict(extra="ignore")

    type: str
    content: str


class PersonalityIn(BaseModel):
    description: Optional[str] = None


class ChatRequest(BaseModel):
    messages: List[ChatTurn]
    personality: Optional[PersonalityIn] = None


class OptionsPayload(BaseModel):
    options: List[str]


def parse_chat_request(body) -> ChatRequest:
    messages = body.get("messages") if isinstance(body, dict) else None
    if not messages or not isinstance(messages, list):
        raise BadRequest("Messages array is required")
    try:
        return ChatRequest.model_validate(body)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first["loc"])
        raise BadRequest(f"Invalid request field {where}: {first['msg']}")


def to_generation_request(req: ChatRequest) -> GenerationRequest:
    transcript = [Message(role=t.type, content=t.content) for t in req.messages]
    description = req.personality.description if req.personality else None
    personality = Personality(description=description) if description else default_personality()
    return GenerationRequest.from_transcript(transcript, personality)


# ------------------------------------------------------------
# 💬 Main chat route
# ------------------------------------------------------------
@app.post("/api/chat", response_model=OptionsPayload)
async def chat(request: Request, generator: OptionGenerator = Depends(get_generator)):
    try:
        body = await request.json()
    except ValueError:
        raise BadRequest("Request body must be valid JSON")

    gen_req = to_generation_request(parse_chat_request(body))
    result = await run_in_threadpool(generator.generate, gen_req)
    logger.info("Returned %d options (source=%s, history=%d)", len(result.options), result.source, len(gen_req.history))
    return OptionsPayload(options=result.options)


@app.get("/api/chat")
def chat_status():
    return {"message": "Chat API is running"}


# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz(generator: OptionGenerator = Depends(get_generator)):
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "engine": type(generator.model_client).__name__,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": "Pick-bot service running."}
