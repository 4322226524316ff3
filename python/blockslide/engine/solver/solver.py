"""Breadth-first sliding block solver.

Moves all cost one and the frontier is strictly first-in first-out, so
boards come off the queue in order of move count. Each configuration is
queued at most once, at the shallowest depth it is reachable, which makes
the first dequeued board that satisfies the goal a shortest solution.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter

from blockslide.config import SearchConfig
from blockslide.engine.goals import GoalPredicate
from blockslide.models.board import Board, Move
from blockslide.models.fingerprint import Fingerprint

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"  # every reachable configuration tried; no solution
    ABORTED = "aborted"  # stopped early by a state limit or stop request


@dataclass
class SearchStats:
    """Counters for one search run.

    ``configurations`` counts distinct fingerprints seen, the start board
    included; ``skipped`` counts generated boards thrown away because their
    configuration had already been seen.
    """

    configurations: int = 0
    skipped: int = 0
    expanded: int = 0
    generated: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0


@dataclass(frozen=True)
class Solution:
    status: SearchStatus
    board: Board | None = None
    moves: tuple[Move, ...] = ()
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def length(self) -> int:
        return len(self.moves)


class BreadthFirstSearch:
    """One breadth-first run over the boards reachable from *start*.

    The frontier and seen-set belong to this instance, so separate
    searches never share state. An instance can be run only once.
    """

    def __init__(
        self,
        start: Board,
        goal: GoalPredicate,
        *,
        max_states: int | None = None,
        progress_every: int = 0,
        should_stop: Callable[[], bool] | None = None,
    ) -> None:
        self.start = start
        self.goal = goal
        self.max_states = max_states
        self.progress_every = progress_every
        self.should_stop = should_stop
        self.stats = SearchStats()
        self._frontier: deque[Board] = deque()
        self._seen: set[Fingerprint] = set()
        self._started = False

    def run(self) -> Solution:
        if self._started:
            raise RuntimeError("BreadthFirstSearch.run() may only be called once.")
        self._started = True
        t0 = perf_counter()

        logger.info(
            "Searching %d×%d board with %d pieces",
            self.start.width, self.start.height, len(self.start.pieces),
        )
        self._frontier.append(self.start)
        self._seen.add(self.start.fingerprint())
        self.stats.max_frontier = 1

        while self._frontier:
            if self.should_stop is not None and self.should_stop():
                return self._finish(SearchStatus.ABORTED, None, t0)

            board = self._frontier.popleft()
            if self.goal(board):
                return self._finish(SearchStatus.SOLVED, board, t0)

            self._expand(board)

            if self.max_states is not None and len(self._seen) > self.max_states:
                return self._finish(SearchStatus.ABORTED, None, t0)
            if self.progress_every and self.stats.expanded % self.progress_every == 0:
                logger.debug(
                    "Expanded %d boards, depth %d, %d configurations, frontier %d",
                    self.stats.expanded, board.depth - self.start.depth,
                    len(self._seen), len(self._frontier),
                )

        return self._finish(SearchStatus.EXHAUSTED, None, t0)

    # -- helpers --------------------------------------------------------------

    def _expand(self, board: Board) -> None:
        self.stats.expanded += 1
        for move in board.legal_moves():
            child = board.apply(move)
            self.stats.generated += 1
            key = child.fingerprint()
            if key in self._seen:
                self.stats.skipped += 1
                continue
            self._seen.add(key)
            self._frontier.append(child)
        self.stats.max_frontier = max(self.stats.max_frontier, len(self._frontier))

    def _finish(
        self, status: SearchStatus, board: Board | None, t0: float
    ) -> Solution:
        self.stats.configurations = len(self._seen)
        self.stats.elapsed = perf_counter() - t0
        moves = board.moves[self.start.depth:] if board is not None else ()
        logger.info(
            "Search %s: %d moves, %d configurations, %d skipped in %.2fs",
            status.value, len(moves), self.stats.configurations,
            self.stats.skipped, self.stats.elapsed,
        )
        return Solution(status=status, board=board, moves=moves, stats=self.stats)


class Solver:
    """Stateless entry points — all methods are static."""

    @staticmethod
    def solve(
        board: Board, goal: GoalPredicate, *, config: SearchConfig | None = None
    ) -> Solution:
        """Return the shortest solution from *board*, or a failed ``Solution``.

        Without *config* the search runs unlimited and ignores the environment.
        """
        if config is None:
            return BreadthFirstSearch(board, goal).run()
        search = BreadthFirstSearch(
            board,
            goal,
            max_states=config.max_states,
            progress_every=config.progress_every,
        )
        return search.run()

    @staticmethod
    def hint(
        board: Board, goal: GoalPredicate, *, config: SearchConfig | None = None
    ) -> Move | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        solution = Solver.solve(board, goal, config=config)
        return solution.moves[0] if solution.moves else None
