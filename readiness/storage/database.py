"""SQL persistence of learner state snapshots"""
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from pydantic import ValidationError

from ..errors import PersistenceFailure
from ..models import LearnerState
from ..utils import config, logger

CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS learner_state (
        learner_id VARCHAR(128) PRIMARY KEY,
        role_id VARCHAR(128),
        payload TEXT NOT NULL,
        updated_at VARCHAR(40) NOT NULL
    )
"""

UPSERT_STATE = """
    INSERT INTO learner_state (learner_id, role_id, payload, updated_at)
    VALUES (:learner_id, :role_id, :payload, :updated_at)
    ON CONFLICT (learner_id) DO UPDATE SET
        role_id = excluded.role_id,
        payload = excluded.payload,
        updated_at = excluded.updated_at
"""


class LearnerStateStore:
    """Stores one JSON snapshot per learner"""

    def __init__(self, database_url: Optional[str] = None):
        url = database_url or config.database_url
        if not url:
            raise ValueError("No database URL configured (set READINESS_DATABASE_URL)")

        self.engine = create_engine(url, pool_pre_ping=True, echo=False)
        with self.engine.begin() as conn:
            conn.execute(text(CREATE_TABLE))
        logger.info(f"Learner state store ready at {self.engine.url.render_as_string(hide_password=True)}")

    def save(self, state: LearnerState) -> None:
        """Upsert the learner's snapshot"""
        params = {
            "learner_id": state.learner_id,
            "role_id": state.role.id if state.role else None,
            "payload": state.model_dump_json(),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            with self.engine.begin() as conn:
                conn.execute(text(UPSERT_STATE), params)
        except SQLAlchemyError as e:
            raise PersistenceFailure(state.learner_id, e) from e

    def load(self, learner_id: str) -> Optional[LearnerState]:
        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    text("SELECT payload FROM learner_state WHERE learner_id = :learner_id"),
                    {"learner_id": learner_id},
                ).fetchone()
        except SQLAlchemyError as e:
            raise PersistenceFailure(learner_id, e) from e

        if row is None:
            return None
        try:
            return LearnerState.model_validate_json(row[0])
        except ValidationError as e:
            raise PersistenceFailure(learner_id, e) from e

    def delete(self, learner_id: str) -> bool:
        try:
            with self.engine.begin() as conn:
                result = conn.execute(
                    text("DELETE FROM learner_state WHERE learner_id = :learner_id"),
                    {"learner_id": learner_id},
                )
        except SQLAlchemyError as e:
            raise PersistenceFailure(learner_id, e) from e
        return result.rowcount > 0

    def dispose(self) -> None:
        self.engine.dispose()
