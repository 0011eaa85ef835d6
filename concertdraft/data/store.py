# concertdraft/data/store.py
# JSON 파일 기반 키-값 저장소 + 공연 컬렉션 CRUD
from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from concertdraft.core.config import Settings, settings as default_settings
from concertdraft.models.concert import Concert, ConcertIn, ConcertPatch
from concertdraft.models.lifecycle import apply_milestone_toggle
from concertdraft.rules.postrules.textutils import gen_id

log = logging.getLogger(__name__)

# 같은 파일을 가리키는 JsonStore 들은 같은 락을 쓴다 (요청마다 저장소를 새로 만들어도 직렬화)
_PATH_LOCKS: Dict[str, threading.RLock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = os.path.abspath(path)
    with _PATH_LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(key, threading.RLock())


class ConcertNotFound(KeyError):
    pass


def utc_now_iso() -> str:
    # 2026-03-01T12:00:00.000Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonStore:
    """
    <data_dir>/<name>.json 하나에 컬렉션 전체를 저장한다.
    쓰기 전에 기존 파일을 <name>.json.bak.1 … .bak.N 으로 밀어 백업한다.
    """

    def __init__(self, data_dir: str | Path, name: str, backups: int = 3):
        self.data_dir = Path(data_dir)
        self.name = name
        self.backups = max(0, int(backups))
        self.lock = _lock_for(self.path)

    @property
    def path(self) -> Path:
        return self.data_dir / f"{self.name}.json"

    def backup_path(self, n: int) -> Path:
        return self.data_dir / f"{self.name}.json.bak.{n}"

    def read(self, fallback: Any) -> Any:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return fallback
        except json.JSONDecodeError:
            log.warning("store %s: unreadable JSON, using fallback", self.path)
            return fallback

    def write(self, data: Any) -> None:
        with self.lock:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self._rotate_backups()
            # 쓰기마다 고유한 임시 파일 → 원자적 교체
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.data_dir,
                prefix=f"{self.name}.", suffix=".tmp", delete=False,
            ) as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                tmp = f.name
            os.replace(tmp, self.path)

    def _rotate_backups(self) -> None:
        if not self.backups or not self.path.exists():
            return
        for n in range(self.backups - 1, 0, -1):
            src = self.backup_path(n)
            if src.exists():
                os.replace(src, self.backup_path(n + 1))
        shutil.copy2(self.path, self.backup_path(1))


class ConcertRepository:
    """
    create / list / get / patch / delete / toggle_milestone.
    매 호출마다 컬렉션 전체를 읽고 쓰며, 읽기-수정-쓰기는 저장 파일 단위 락 안에서 끝난다.
    """

    def __init__(self, store: JsonStore):
        self.store = store

    @classmethod
    def from_settings(cls, cfg: Optional[Settings] = None) -> "ConcertRepository":
        cfg = cfg or default_settings
        return cls(JsonStore(cfg.data_dir, cfg.concerts_store, cfg.store_backups))

    def _load(self) -> List[Concert]:
        return [Concert.model_validate(row) for row in self.store.read([])]

    def _save(self, concerts: List[Concert]) -> None:
        self.store.write([c.to_json_dict() for c in concerts])

    def list(self) -> List[Concert]:
        with self.store.lock:
            return self._load()

    def get(self, concert_id: str) -> Concert:
        for c in self.list():
            if c.id == concert_id:
                return c
        raise ConcertNotFound(concert_id)

    def create(self, data: ConcertIn) -> Concert:
        now = utc_now_iso()
        concert = Concert.model_validate({
            **data.model_dump(),
            "id": gen_id("uc"),
            "created_at": now,
            "updated_at": now,
            "version": 1,
        })
        with self.store.lock:
            concerts = self._load()
            concerts.append(concert)
            self._save(concerts)
        log.info("concert created: %s (%s)", concert.id, concert.title)
        return concert

    def _apply(self, concerts: List[Concert], i: int, updates: Dict[str, Any]) -> Concert:
        c = concerts[i]
        merged = {**c.model_dump(), **updates}
        merged["version"] = c.version + 1
        merged["updated_at"] = utc_now_iso()
        concerts[i] = Concert.model_validate(merged)
        self._save(concerts)
        log.info("concert patched: %s v%s", c.id, merged["version"])
        return concerts[i]

    def patch(self, patch: ConcertPatch) -> Concert:
        # 넘어온 필드만 반영, version +1
        updates = patch.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"})
        with self.store.lock:
            concerts = self._load()
            for i, c in enumerate(concerts):
                if c.id == patch.id:
                    return self._apply(concerts, i, updates)
        raise ConcertNotFound(patch.id)

    def toggle_milestone(self, concert_id: str, milestone_id: str) -> Concert:
        """
        마일스톤 하나의 상태를 다음 칸으로. 없는 공연이면 ConcertNotFound,
        없는 마일스톤이면 KeyError(milestone_id).
        """
        with self.store.lock:
            concerts = self._load()
            for i, c in enumerate(concerts):
                if c.id == concert_id:
                    toggled = apply_milestone_toggle(c, milestone_id)
                    updates = ConcertPatch.model_validate({"id": concert_id, **toggled})
                    return self._apply(concerts, i, updates.model_dump(exclude_unset=True, exclude={"id"}))
        raise ConcertNotFound(concert_id)

    def delete(self, concert_id: str) -> List[Concert]:
        with self.store.lock:
            concerts = self._load()
            remaining = [c for c in concerts if c.id != concert_id]
            if len(remaining) == len(concerts):
                raise ConcertNotFound(concert_id)
            self._save(remaining)
        log.info("concert deleted: %s", concert_id)
        return remaining
