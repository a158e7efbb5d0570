from npuzzle.engine.solvability.parity import is_insoluble, is_solvable

__all__ = ["is_insoluble", "is_solvable"]
