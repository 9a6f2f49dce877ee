"""Game of Life grid with a terminal runner, free-look camera, input handling and cube meshes."""

__version__ = "0.1.0"
__all__ = ["camera", "controls", "life", "mesh"]