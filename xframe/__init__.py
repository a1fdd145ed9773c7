"""JSON settings, frame timing, a Y-up camera, input state and immediate-mode debug line drawing."""

__version__ = "0.1.0"
__all__ = ["config", "timer", "camera", "input", "shapes", "simpledraw", "viewport"]