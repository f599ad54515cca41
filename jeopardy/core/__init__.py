from .config import GameConfig
from .env import load_env

__all__ = ["GameConfig", "load_env"]
