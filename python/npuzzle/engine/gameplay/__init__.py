from npuzzle.engine.gameplay.game import GamePlay, path_to_directions

__all__ = ["GamePlay", "path_to_directions"]
