"""Utilities package"""
from .config import config
from .logger import logger
from .numbers import round_half_up, clamp
from .performance import monitor, PerformanceMonitor

__all__ = ["config", "logger", "round_half_up", "clamp", "monitor", "PerformanceMonitor"]
