"""Orchestrator module."""
from .processor import AggregationOrchestrator, RunResult

__all__ = ["AggregationOrchestrator", "RunResult"]
