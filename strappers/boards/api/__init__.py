from strappers.boards.api.boards import BoardController

__all__ = [
    "BoardController",
]
