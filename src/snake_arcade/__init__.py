from .controller import GameController
from .logic import place_food, step
from .state import Direction, State, initial_state

__all__ = ["GameController", "Direction", "State", "initial_state", "place_food", "step"]
