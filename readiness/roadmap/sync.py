"""Roadmap completion state machine.

Each item is either incomplete or completed. Completing an item grants the
skill at the item's level, re-scores the selected role and records a
``roadmap_completion`` event. Un-completing only flips the checkbox: the
skill upgrade and the recorded history stay.

Functions here never mutate their inputs. When re-scoring fails the error
propagates and the caller still holds the pre-toggle state.
"""
from datetime import datetime
from typing import List, Mapping, Optional, Sequence, Tuple

from .models import RoadmapItem, RoadmapProgress, ToggleResult
from ..errors import ItemNotFound, NoRoleSelected
from ..progress.models import AnalysisProgress, ProgressEventType
from ..progress.tracker import init_progress, record_progress_event
from ..skills.models import JobRole, Skill, UserSkill
from ..skills.proficiency import ProficiencyLevel, rank
from ..skills.scorer import score_skill_gap
from ..utils import logger, monitor, round_half_up


def roadmap_progress(roadmap: Sequence[RoadmapItem]) -> RoadmapProgress:
    total = len(roadmap)
    completed = sum(1 for item in roadmap if item.completed)
    percent = int(round_half_up(100 * completed / total)) if total else 0
    return RoadmapProgress(total_items=total, completed_items=completed, progress=percent)


def is_roadmap_completed(roadmap: Sequence[RoadmapItem]) -> bool:
    """True when every item is completed; an empty roadmap is never complete"""
    return roadmap_progress(roadmap).is_complete


def target_proficiency(difficulty: str) -> ProficiencyLevel:
    """Level granted when an item of this difficulty is completed"""
    if difficulty == ProficiencyLevel.ADVANCED.value:
        return ProficiencyLevel.ADVANCED
    if difficulty == ProficiencyLevel.BEGINNER.value:
        return ProficiencyLevel.BEGINNER
    return ProficiencyLevel.INTERMEDIATE


def flip_item(roadmap: Sequence[RoadmapItem], item_id: str) -> Tuple[List[RoadmapItem], RoadmapItem]:
    """Return a new roadmap with one item's completion flipped, and that item"""
    flipped = None
    updated = []
    for item in roadmap:
        if item.id == item_id and flipped is None:
            item = item.model_copy(update={"completed": not item.completed})
            flipped = item
        updated.append(item)

    if flipped is None:
        raise ItemNotFound(item_id)
    return updated, flipped


def apply_completion(
    inventory: Sequence[UserSkill],
    item: RoadmapItem,
    catalog: Optional[Mapping[str, Skill]] = None,
) -> List[UserSkill]:
    """Add the item's skill or raise it to the item's level. Never downgrades."""
    level = target_proficiency(item.difficulty)
    updated = list(inventory)

    for i, user_skill in enumerate(updated):
        if user_skill.id != item.skill_id:
            continue
        if rank(user_skill.proficiency) < rank(level):
            logger.info(f"Raised {item.skill_id}: {user_skill.proficiency.value} -> {level.value}")
            updated[i] = user_skill.model_copy(update={"proficiency": level})
        return updated

    skill = catalog.get(item.skill_id) if catalog else None
    updated.append(UserSkill(
        id=item.skill_id,
        name=skill.name if skill else item.skill_name,
        category=skill.category if skill else "",
        proficiency=level,
    ))
    logger.info(f"Added {item.skill_id} at {level.value}")
    return updated


@monitor.measure
def toggle_roadmap_item(
    roadmap: Sequence[RoadmapItem],
    item_id: str,
    inventory: Sequence[UserSkill],
    role: Optional[JobRole] = None,
    progress: Optional[AnalysisProgress] = None,
    catalog: Optional[Mapping[str, Skill]] = None,
    timestamp: Optional[datetime] = None,
) -> ToggleResult:
    """
    Toggle one roadmap item and cascade a completion into skills and progress

    Args:
        roadmap: Current roadmap
        item_id: Item to toggle
        inventory: Learner's skills
        role: Selected role, required when completing
        progress: Progress for the role; initialised from the pre-toggle
            inventory when None
        catalog: Optional skill index used to name newly added skills
        timestamp: Event time, defaults to now

    Returns:
        ToggleResult with the new roadmap, aggregate and inventory, plus the
        new analysis and progress when the item was completed
    """
    new_roadmap, item = flip_item(roadmap, item_id)
    aggregate = roadmap_progress(new_roadmap)

    if not item.completed:
        logger.info(f"Unchecked {item_id}; skills and analysis unchanged")
        return ToggleResult(
            item=item,
            roadmap=new_roadmap,
            roadmap_progress=aggregate,
            inventory=list(inventory),
        )

    try:
        if role is None:
            raise NoRoleSelected()
        if progress is None:
            progress = init_progress(score_skill_gap(inventory, role, catalog), timestamp)

        new_inventory = apply_completion(inventory, item, catalog)
        analysis = score_skill_gap(new_inventory, role, catalog)
        new_progress = record_progress_event(
            progress, analysis, ProgressEventType.ROADMAP_COMPLETION, item.skill_id, timestamp
        )
    except Exception as e:
        logger.error(f"Completion of {item_id} rolled back: {e}")
        raise

    logger.info(
        f"Completed {item_id}: roadmap {aggregate.completed_items}/{aggregate.total_items}, "
        f"readiness {analysis.readiness_score}%"
    )

    return ToggleResult(
        item=item,
        roadmap=new_roadmap,
        roadmap_progress=aggregate,
        inventory=new_inventory,
        analysis=analysis,
        progress=new_progress,
    )
