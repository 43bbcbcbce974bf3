from backend.engine.gameplay.events import Event, ShuffleRequested, TilePressed
from backend.engine.gameplay.game import GamePlay

__all__ = ["Event", "GamePlay", "ShuffleRequested", "TilePressed"]
