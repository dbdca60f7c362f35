"""Readiness progress tracking"""
from .models import AnalysisProgress, ProgressEvent, ProgressEventType
from .tracker import init_progress, record_progress_event

__all__ = [
    "AnalysisProgress", "ProgressEvent", "ProgressEventType",
    "init_progress", "record_progress_event",
]
