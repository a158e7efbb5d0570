from npuzzle.engine.goal.goal import construct_goal

__all__ = ["construct_goal"]
