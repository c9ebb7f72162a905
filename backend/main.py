from typing import Optional
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from config import settings, logger, check_api_keys_on_startup
from models.session import AnalyzeRequest, AnalyzeResponse, SessionSnapshot
from services.analysis import AnalysisClient
from services.history import HistoryStore
from services.session import AnalysisSession
from utils.storage import JsonFileStorage

app = FastAPI(title="VeriFact", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost", "http://127.0.0.1"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def build_session(data_dir: Optional[str] = None) -> AnalysisSession:
    store = HistoryStore(JsonFileStorage(data_dir or settings.VERIFACT_DATA_DIR))
    store.load()
    return AnalysisSession(AnalysisClient(), store)


@app.on_event("startup")
async def startup_event():
    check_api_keys_on_startup()
    if getattr(app.state, "session", None) is None:
        app.state.session = build_session()
        logger.info("History loaded from %s", settings.VERIFACT_DATA_DIR)


def get_session(request: Request) -> AnalysisSession:
    session = getattr(request.app.state, "session", None)
    if session is None:
        session = build_session()
        request.app.state.session = session
    return session


@app.get("/")
async def health_check():
    return {"status": "ok", "message": "VeriFact is running."}


@app.get("/state", response_model=SessionSnapshot)
async def get_state(request: Request):
    return get_session(request).snapshot()


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest, request: Request):
    session = get_session(request)
    accepted = await session.submit(req.claim)
    return AnalyzeResponse(accepted=accepted, state=session.snapshot())


@app.post("/history/clear", response_model=SessionSnapshot)
async def clear_history(request: Request):
    session = get_session(request)
    session.clear()
    return session.snapshot()


@app.post("/history/{outcome_id}/select", response_model=SessionSnapshot)
async def select_history_entry(outcome_id: str, request: Request):
    session = get_session(request)
    if session.select(outcome_id) is None:
        raise HTTPException(status_code=404, detail=f"No history entry with id {outcome_id}")
    return session.snapshot()
