"""Engine error taxonomy"""


class ReadinessError(Exception):
    """Base class for engine errors"""


class InvalidLevel(ReadinessError, ValueError):
    """Unknown proficiency level"""

    def __init__(self, level):
        self.level = level
        super().__init__(f"Invalid proficiency level: {level!r}")


class NoRoleSelected(ReadinessError):
    """Scoring or syncing was invoked without a target role"""

    def __init__(self, message: str = "Please select a role first"):
        super().__init__(message)


class ItemNotFound(ReadinessError, LookupError):
    """Roadmap toggle on an unknown item id"""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Roadmap item not found: {item_id}")


class SkillNotInInventory(ReadinessError, LookupError):
    """Proficiency update or removal for a skill the learner does not have"""

    def __init__(self, skill_id: str):
        self.skill_id = skill_id
        super().__init__(f"Skill not in inventory: {skill_id}")


class PersistenceFailure(ReadinessError):
    """Saving learner state failed. Never aborts an in-memory change."""

    def __init__(self, learner_id: str, cause: Exception = None):
        self.learner_id = learner_id
        self.cause = cause
        super().__init__(f"Failed to persist state for {learner_id}: {cause}")
