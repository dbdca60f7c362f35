"""Learner state persistence"""
from .database import LearnerStateStore

__all__ = ["LearnerStateStore"]
