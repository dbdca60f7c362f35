"""Per-learner session: serialized state transitions and background persistence"""
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Dict, List, Optional, Protocol

from .catalog import Catalog
from .errors import NoRoleSelected, PersistenceFailure, SkillNotInInventory
from .models import LearnerState
from .progress.models import AnalysisProgress, ProgressEventType
from .progress.tracker import init_progress, record_progress_event
from .roadmap.generator import generate_roadmap
from .roadmap.models import RoadmapItem, RoadmapProgress, ToggleResult
from .roadmap.sync import flip_item, roadmap_progress, toggle_roadmap_item
from .skills.models import JobRole, Skill, SkillGapAnalysis, UserSkill
from .skills.proficiency import LevelLike, parse_level
from .skills.scorer import score_skill_gap
from .utils import logger


class StateStore(Protocol):
    def save(self, state: LearnerState) -> None: ...


class LearnerSession:
    """
    Holds one learner's state and applies every change under a lock

    Saves run on a single background worker so snapshots reach the store in
    order. A failed save is logged and recorded in ``persistence_failures``;
    it never changes the in-memory state.
    """

    def __init__(
        self,
        learner_id: str,
        store: Optional[StateStore] = None,
        catalog: Optional[Catalog] = None,
        state: Optional[LearnerState] = None,
        on_persistence_failure: Optional[Callable[[PersistenceFailure], None]] = None,
    ):
        self.learner_id = learner_id
        self.store = store
        self.catalog = catalog or Catalog()
        self.on_persistence_failure = on_persistence_failure
        self.persistence_failures: List[PersistenceFailure] = []

        self._skills = self.catalog.skill_index()
        self._state = state or LearnerState(learner_id=learner_id)
        self._lock = threading.RLock()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"persist-{learner_id}")
        self._pending: List[Future] = []

    # --- State accessors ---

    @property
    def state(self) -> LearnerState:
        return self._state

    @property
    def inventory(self) -> List[UserSkill]:
        return self._state.inventory

    @property
    def role(self) -> Optional[JobRole]:
        return self._state.role

    @property
    def analysis(self) -> Optional[SkillGapAnalysis]:
        return self._state.analysis

    @property
    def progress(self) -> Optional[AnalysisProgress]:
        return self._state.progress

    @property
    def roadmap(self) -> List[RoadmapItem]:
        return self._state.roadmap

    @property
    def roadmap_progress(self) -> RoadmapProgress:
        return roadmap_progress(self._state.roadmap)

    # --- Inventory ---

    def add_skill(self, skill: Skill, proficiency: LevelLike) -> LearnerState:
        """Add a skill; a skill already in the inventory is left untouched"""
        level = parse_level(proficiency)
        with self._lock:
            if any(s.id == skill.id for s in self._state.inventory):
                return self._state
            user_skill = UserSkill(id=skill.id, name=skill.name, category=skill.category, proficiency=level)
            inventory = [*self._state.inventory, user_skill]
            return self._commit_inventory(inventory, ProgressEventType.SKILL_ADDED, skill.id)

    def remove_skill(self, skill_id: str) -> LearnerState:
        with self._lock:
            if not any(s.id == skill_id for s in self._state.inventory):
                raise SkillNotInInventory(skill_id)
            inventory = [s for s in self._state.inventory if s.id != skill_id]
            return self._commit_inventory(inventory, ProgressEventType.SKILL_REMOVED, skill_id)

    def update_skill_proficiency(self, skill_id: str, proficiency: LevelLike) -> LearnerState:
        level = parse_level(proficiency)
        with self._lock:
            if not any(s.id == skill_id for s in self._state.inventory):
                raise SkillNotInInventory(skill_id)
            inventory = [
                s.model_copy(update={"proficiency": level}) if s.id == skill_id else s
                for s in self._state.inventory
            ]
            return self._commit_inventory(inventory, ProgressEventType.SKILL_UPDATED, skill_id)

    def _commit_inventory(self, inventory: List[UserSkill], event: ProgressEventType, skill_id: str) -> LearnerState:
        state = self._state
        update = {"inventory": inventory}

        # Re-score only once the role has been analyzed
        if state.role is not None and state.analysis is not None:
            analysis = score_skill_gap(inventory, state.role, self._skills)
            update["analysis"] = analysis
            if state.progress is not None:
                update["progress"] = record_progress_event(state.progress, analysis, event, skill_id)

        self._state = state.model_copy(update=update)
        logger.info(f"{self.learner_id}: {event.value} {skill_id}")
        self._persist(self._state)
        return self._state

    # --- Role and analysis ---

    def select_role(self, role: JobRole) -> LearnerState:
        """Select a target role. Switching roles discards analysis, progress and roadmap."""
        with self._lock:
            current = self._state.role
            if current is not None and current.id == role.id:
                return self._state

            if self._state.progress is not None:
                logger.info(f"{self.learner_id}: switching from {current.id} to {role.id}, progress reset")
            self._state = self._state.model_copy(update={
                "role": role,
                "analysis": None,
                "progress": None,
                "roadmap": [],
            })
            self._persist(self._state)
            return self._state

    def analyze(self) -> SkillGapAnalysis:
        """
        Score the selected role

        The first analysis of a role sets the progress baseline. Later ones
        append a ``reanalysis`` event to the existing history.
        """
        with self._lock:
            state = self._state
            if state.role is None:
                raise NoRoleSelected()

            analysis = score_skill_gap(state.inventory, state.role, self._skills)
            progress = state.progress
            if progress is None or progress.role_id != state.role.id:
                progress = init_progress(analysis)
            else:
                progress = record_progress_event(progress, analysis, ProgressEventType.REANALYSIS)

            self._state = state.model_copy(update={"analysis": analysis, "progress": progress})
            self._persist(self._state)
            return analysis

    def generate_roadmap(self) -> List[RoadmapItem]:
        """Replace the roadmap with one built from the current analysis"""
        with self._lock:
            if self._state.analysis is None:
                self.analyze()
            roadmap = generate_roadmap(self._state.analysis, self.catalog.resources)
            self._state = self._state.model_copy(update={"roadmap": roadmap})
            self._persist(self._state)
            return roadmap

    def reset_progress(self) -> LearnerState:
        with self._lock:
            self._state = self._state.model_copy(update={
                "role": None,
                "analysis": None,
                "progress": None,
                "roadmap": [],
            })
            logger.info(f"{self.learner_id}: progress reset")
            self._persist(self._state)
            return self._state

    # --- Roadmap toggling ---

    def toggle(self, item_id: str) -> ToggleResult:
        """
        Toggle a roadmap item

        The flip is applied to the held state first. If updating skills or
        analysis then fails, the held state is restored to the exact
        pre-toggle snapshot and the error is re-raised. The save that follows
        a successful toggle is not awaited.
        """
        with self._lock:
            snapshot = self._state

            # Optimistic local flip
            optimistic_roadmap, _ = flip_item(snapshot.roadmap, item_id)
            self._state = snapshot.model_copy(update={"roadmap": optimistic_roadmap})

            try:
                result = toggle_roadmap_item(
                    snapshot.roadmap,
                    item_id,
                    snapshot.inventory,
                    role=snapshot.role,
                    progress=snapshot.progress,
                    catalog=self._skills,
                )
            except Exception:
                self._state = snapshot
                logger.error(f"{self.learner_id}: toggle of {item_id} failed, state restored")
                raise

            self._state = snapshot.model_copy(update={
                "roadmap": result.roadmap,
                "inventory": result.inventory,
                "analysis": result.analysis or snapshot.analysis,
                "progress": result.progress or snapshot.progress,
            })
            self._persist(self._state)
            return result

    # --- Persistence ---

    def _persist(self, state: LearnerState) -> None:
        if self.store is None:
            return
        self._pending = [f for f in self._pending if not f.done()]
        try:
            self._pending.append(self._executor.submit(self._save, state))
        except RuntimeError as e:
            # Executor already shut down by close()
            self._report_failure(PersistenceFailure(state.learner_id, e))

    def _save(self, state: LearnerState) -> None:
        try:
            self.store.save(state)
        except Exception as e:
            failure = e if isinstance(e, PersistenceFailure) else PersistenceFailure(state.learner_id, e)
            self._report_failure(failure)

    def _report_failure(self, failure: PersistenceFailure) -> None:
        logger.warning(f"Save failed, keeping local state: {failure}")
        self.persistence_failures.append(failure)
        if self.on_persistence_failure is not None:
            self.on_persistence_failure(failure)

    def flush(self, timeout: Optional[float] = None) -> None:
        """Wait for pending saves"""
        pending = list(self._pending)
        if pending:
            wait(pending, timeout=timeout)

    def close(self) -> None:
        self.flush()
        self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class SessionRegistry:
    """One session per learner, restored from the store when available"""

    def __init__(self, store: Optional[StateStore] = None, catalog: Optional[Catalog] = None):
        self.store = store
        self.catalog = catalog
        self._sessions: Dict[str, LearnerSession] = {}
        self._lock = threading.Lock()

    def get(self, learner_id: str) -> LearnerSession:
        with self._lock:
            session = self._sessions.get(learner_id)
            if session is None:
                session = LearnerSession(
                    learner_id,
                    store=self.store,
                    catalog=self.catalog,
                    state=self._restore(learner_id),
                )
                self._sessions[learner_id] = session
            return session

    def _restore(self, learner_id: str) -> Optional[LearnerState]:
        load = getattr(self.store, "load", None)
        if load is None:
            return None
        try:
            return load(learner_id)
        except PersistenceFailure as e:
            logger.warning(f"Could not restore {learner_id}, starting fresh: {e}")
            return None

    def close_all(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.close()
