from blockslide.engine.goals.goals import GoalPredicate, all_of, piece_at

__all__ = ["GoalPredicate", "all_of", "piece_at"]
