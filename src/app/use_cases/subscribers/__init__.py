"""Use cases de subscribers (Ghost → SparkLoop)."""

from .sync_subscriber import SyncSubscriberResult, SyncSubscriberUseCase, run_best_effort

__all__ = [
    "SyncSubscriberResult",
    "SyncSubscriberUseCase",
    "run_best_effort",
]
