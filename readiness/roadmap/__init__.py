"""Roadmap generation and completion sync"""
from .models import RoadmapItem, RoadmapProgress, ToggleResult
from .generator import generate_roadmap, estimate_hours
from .sync import (
    toggle_roadmap_item,
    roadmap_progress,
    is_roadmap_completed,
    target_proficiency,
    apply_completion,
)

__all__ = [
    "RoadmapItem", "RoadmapProgress", "ToggleResult",
    "generate_roadmap", "estimate_hours",
    "toggle_roadmap_item", "roadmap_progress", "is_roadmap_completed",
    "target_proficiency", "apply_completion",
]
