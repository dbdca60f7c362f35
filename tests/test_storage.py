import pytest
from sqlalchemy import text

from readiness import LearnerState, PersistenceFailure
from readiness.storage import LearnerStateStore


@pytest.fixture
def store(tmp_path):
    s = LearnerStateStore(f"sqlite:///{tmp_path / 'readiness.db'}")
    yield s
    s.dispose()


@pytest.fixture
def state(user_skill, frontend_role):
    return LearnerState(
        learner_id="learner-1",
        inventory=[user_skill("js", "advanced", name="JavaScript")],
        role=frontend_role,
    )


class TestLearnerStateStore:
    def test_round_trip(self, store, state):
        store.save(state)

        assert store.load("learner-1") == state

    def test_missing_learner(self, store):
        assert store.load("nobody") is None

    def test_save_overwrites(self, store, state, user_skill):
        store.save(state)
        updated = state.model_copy(update={"inventory": [*state.inventory, user_skill("css", "beginner")]})
        store.save(updated)

        assert [s.id for s in store.load("learner-1").inventory] == ["js", "css"]

    def test_delete(self, store, state):
        store.save(state)

        assert store.delete("learner-1") is True
        assert store.delete("learner-1") is False
        assert store.load("learner-1") is None

    def test_database_errors_are_wrapped(self, store, state):
        with store.engine.begin() as conn:
            conn.execute(text("DROP TABLE learner_state"))

        with pytest.raises(PersistenceFailure) as exc_info:
            store.save(state)
        assert exc_info.value.learner_id == "learner-1"
        assert exc_info.value.cause is not None

    def test_unreadable_payload_is_wrapped(self, store):
        with store.engine.begin() as conn:
            conn.execute(text(
                "INSERT INTO learner_state (learner_id, role_id, payload, updated_at) "
                "VALUES ('a', NULL, '{not json', 'x')"
            ))

        with pytest.raises(PersistenceFailure) as exc_info:
            store.load("a")
        assert exc_info.value.learner_id == "a"

    def test_requires_url(self, monkeypatch):
        monkeypatch.delenv("READINESS_DATABASE_URL", raising=False)
        monkeypatch.setattr("readiness.storage.database.config._config", {})

        with pytest.raises(ValueError):
            LearnerStateStore()
