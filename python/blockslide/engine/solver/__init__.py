from blockslide.engine.solver.solver import (
    BreadthFirstSearch,
    SearchStats,
    SearchStatus,
    Solution,
    Solver,
)

__all__ = ["BreadthFirstSearch", "SearchStats", "SearchStatus", "Solution", "Solver"]
