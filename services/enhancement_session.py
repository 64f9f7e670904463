"""
Enhancement session state.

A session walks one resume through the upload/analyze/review flow:

    idle -> file_selected -> analyzing -> results_ready -> reviewed

Download is only allowed once the suggestions are reviewed. Sessions live in
process memory and are lost on restart.
"""

import logging
import threading
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from models.resume_models import (
    AnalysisResult,
    Domain,
    DownloadResponse,
    SessionState,
    SessionStatus,
    Template,
)
from services.exceptions import (
    DownloadNotAllowedError,
    InvalidTransitionError,
    SessionNotFoundError,
)
from services.upload_validator import require_fields

logger = logging.getLogger(__name__)

ANALYZABLE_STATES = (SessionState.FILE_SELECTED, SessionState.RESULTS_READY, SessionState.REVIEWED)


class EnhancementSession:
    def __init__(self, session_id: Optional[str] = None):
        self.session_id = session_id or uuid.uuid4().hex
        self.state = SessionState.IDLE
        self.filename: Optional[str] = None
        self.resume_text: Optional[str] = None
        self.job_description: Optional[str] = None
        self.domain: Optional[Domain] = None
        self.template: Optional[Template] = None
        self.result: Optional[AnalysisResult] = None

    @property
    def can_download(self) -> bool:
        return self.state == SessionState.REVIEWED

    def _require(self, action: str, *allowed: SessionState) -> None:
        if self.state not in allowed:
            raise InvalidTransitionError(action, self.state.value)

    def _move(self, new_state: SessionState) -> None:
        logger.info(f"Session {self.session_id}: {self.state.value} -> {new_state.value}")
        self.state = new_state

    def select_file(self, filename: str, resume_text: str) -> None:
        """Attach a (new) resume; any previous results are discarded"""
        if self.state == SessionState.ANALYZING:
            raise InvalidTransitionError("select a file", self.state.value)

        self.filename = filename
        self.resume_text = resume_text
        self.result = None
        self._move(SessionState.FILE_SELECTED)

    def begin_analysis(self, job_description: str, domain: Domain,
                       template: Template = Template.MODERN) -> None:
        require_fields(self.resume_text is not None, job_description)
        self._require("analyze", *ANALYZABLE_STATES)

        self.job_description = job_description
        self.domain = domain
        self.template = template
        self.result = None
        self._move(SessionState.ANALYZING)

    def complete_analysis(self, result: AnalysisResult) -> None:
        self._require("complete analysis", SessionState.ANALYZING)
        self.result = result
        self._move(SessionState.RESULTS_READY)

    def fail_analysis(self) -> None:
        self._require("fail analysis", SessionState.ANALYZING)
        self._move(SessionState.FILE_SELECTED)

    def mark_reviewed(self) -> None:
        self._require("mark suggestions reviewed", SessionState.RESULTS_READY)
        self._move(SessionState.REVIEWED)

    def request_download(self) -> DownloadResponse:
        """
        Export placeholder. No document is generated; the response says so.
        """
        if not self.can_download:
            raise DownloadNotAllowedError(self.state.value)

        logger.info(f"Session {self.session_id}: export requested with template '{self.template.value}'")
        return DownloadResponse(
            session_id=self.session_id,
            template=self.template,
            exported=False,
            message="Enhanced resume export is not available yet; no file was generated",
        )

    def status(self) -> SessionStatus:
        return SessionStatus(
            session_id=self.session_id,
            state=self.state,
            filename=self.filename,
            domain=self.domain,
            template=self.template,
            result=self.result,
            can_download=self.can_download,
        )


class SessionStore:
    """
    In-memory registry of enhancement sessions keyed by id.

    Sessions untouched for ttl_seconds expire. When max_sessions is reached,
    the least recently used session is dropped to make room.
    """

    def __init__(self, ttl_seconds: float = 3600, max_sessions: int = 1000,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max_sessions
        self._clock = clock
        # id -> (session, last touched); ordered oldest touch first
        self._sessions: "OrderedDict[str, Tuple[EnhancementSession, float]]" = OrderedDict()
        self._lock = threading.Lock()

    def _evict_expired(self, now: float) -> None:
        while self._sessions:
            session_id, (_, touched) = next(iter(self._sessions.items()))
            if now - touched <= self.ttl_seconds:
                break
            del self._sessions[session_id]
            logger.info(f"Expired session {session_id}")

    def create(self) -> EnhancementSession:
        session = EnhancementSession()
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            while len(self._sessions) >= self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.warning(f"Session limit reached, evicted session {evicted_id}")
            self._sessions[session.session_id] = (session, now)
        logger.info(f"Created session {session.session_id}")
        return session

    def get(self, session_id: str) -> EnhancementSession:
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            entry = self._sessions.get(session_id)
            if entry is None:
                raise SessionNotFoundError(session_id)
            session = entry[0]
            self._sessions[session_id] = (session, now)
            self._sessions.move_to_end(session_id)
        return session

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(session_id)
        logger.info(f"Deleted session {session_id}")

    def __len__(self) -> int:
        with self._lock:
            self._evict_expired(self._clock())
            return len(self._sessions)
