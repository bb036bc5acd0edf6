from .manager import LogicManager

__all__ = ["LogicManager"]
