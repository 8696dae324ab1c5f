"""Layer-based 2D game engine core: layers, events, input state, collision, resources and a frame loop."""

__version__ = "0.1.0"