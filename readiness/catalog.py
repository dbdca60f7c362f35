"""Reference data: skills, roles and learning resources"""
from pathlib import Path
from typing import Dict, List, Optional, Union
import yaml
from pydantic import BaseModel, Field

from .skills.models import JobRole, LearningResource, Skill
from .utils import logger


class Catalog(BaseModel):
    """Skill, role and resource catalogs consumed by the engine"""
    skills: List[Skill] = Field(default_factory=list)
    roles: List[JobRole] = Field(default_factory=list)
    resources: Dict[str, List[LearningResource]] = Field(default_factory=dict, description="Keyed by skill id")

    def skill_index(self) -> Dict[str, Skill]:
        return {skill.id: skill for skill in self.skills}

    def get_role(self, role_id: str) -> Optional[JobRole]:
        return next((role for role in self.roles if role.id == role_id), None)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load a catalog from YAML"""
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    catalog = Catalog.model_validate(data)
    logger.info(f"Loaded catalog {path}: {len(catalog.skills)} skills, {len(catalog.roles)} roles")
    return catalog
