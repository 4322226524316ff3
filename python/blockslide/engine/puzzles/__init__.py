from blockslide.engine.puzzles.puzzles import Puzzle, get_puzzle, puzzle_names

__all__ = ["Puzzle", "get_puzzle", "puzzle_names"]
