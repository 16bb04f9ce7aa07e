from .entity import Component, Entity
from .frame import FrameClock, FrameSignal
from .scene import Scene

__all__ = [
    "Component",
    "Entity",
    "FrameClock",
    "FrameSignal",
    "Scene",
]
