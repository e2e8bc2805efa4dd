from .collect_system_stats import CollectSystemStatsUseCase

__all__ = ["CollectSystemStatsUseCase"]
