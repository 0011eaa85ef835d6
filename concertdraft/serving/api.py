# concertdraft/serving/api.py
# FastAPI 엔드포인트: 공지 가져오기(초안) + 공연 CRUD + 마일스톤 토글
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Body, Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.config import settings
from ..core.logging import configure_logging
from ..data.store import ConcertNotFound, ConcertRepository
from ..inference.fetch import SourceFetchError
from ..inference.importer import EmptyInputError, import_announcement
from ..models.concert import ConcertIn, ConcertPatch
from ..models.lifecycle import upcoming_milestones
from ..rules.postrules import parse_or_error

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging(settings.log_level)
    yield


app = FastAPI(title="Concert Draft Serving", lifespan=lifespan)


class ImportIn(BaseModel):
    url: Optional[str] = None
    text: Optional[str] = None


def get_repository() -> ConcertRepository:
    return ConcertRepository.from_settings(settings)


def _error(message: str, status: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status)


def _not_found(concert_id: str) -> JSONResponse:
    return _error(f"concert not found: {concert_id}", 404)


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/concerts/import")
def import_concert(body: ImportIn):
    try:
        result = import_announcement(url=body.url, text=body.text)
    except (SourceFetchError, EmptyInputError) as exc:
        log.info("import rejected: %s", exc.message)
        return _error(exc.message)
    return {"draft": result.draft.to_json_dict(), "source": result.source.to_json_dict()}


@app.get("/concerts")
def list_concerts(repo: ConcertRepository = Depends(get_repository)):
    return [c.to_json_dict() for c in repo.list()]


@app.post("/concerts")
def create_concert(payload: Dict[str, Any] = Body(...), repo: ConcertRepository = Depends(get_repository)):
    parsed = parse_or_error(ConcertIn, payload)
    if not parsed.ok:
        return _error(parsed.error)
    return repo.create(parsed.data).to_json_dict()


@app.patch("/concerts")
def patch_concert(payload: Dict[str, Any] = Body(...), repo: ConcertRepository = Depends(get_repository)):
    parsed = parse_or_error(ConcertPatch, payload)
    if not parsed.ok:
        return _error(parsed.error)
    try:
        repo.patch(parsed.data)
    except ConcertNotFound:
        return _not_found(parsed.data.id)
    return [c.to_json_dict() for c in repo.list()]


@app.delete("/concerts")
def delete_concert(payload: Dict[str, Any] = Body(...), repo: ConcertRepository = Depends(get_repository)):
    concert_id = payload.get("id")
    if not isinstance(concert_id, str) or not concert_id:
        return _error("id: String should have at least 1 character")
    try:
        remaining = repo.delete(concert_id)
    except ConcertNotFound:
        return _not_found(concert_id)
    return [c.to_json_dict() for c in remaining]


@app.post("/concerts/{concert_id}/milestones/{milestone_id}/toggle")
def toggle_milestone(concert_id: str, milestone_id: str, repo: ConcertRepository = Depends(get_repository)):
    try:
        patched = repo.toggle_milestone(concert_id, milestone_id)
    except ConcertNotFound:
        return _not_found(concert_id)
    except KeyError:
        return _error(f"milestone not found: {milestone_id}", 404)
    return patched.to_json_dict()


@app.get("/milestones/upcoming")
def list_upcoming(days: int = 7, repo: ConcertRepository = Depends(get_repository)):
    return upcoming_milestones(repo.list(), days=days)
