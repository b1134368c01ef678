from backend.engine.gamegenerator.generator import STOCK_PUZZLES, GameGenerator

__all__ = ["STOCK_PUZZLES", "GameGenerator"]
