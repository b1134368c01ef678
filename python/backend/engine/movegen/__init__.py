from backend.engine.movegen.moves import legal_moves, refresh_moves, store_moves

__all__ = ["legal_moves", "refresh_moves", "store_moves"]
