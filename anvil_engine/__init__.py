"""Backend-independent core of a small rendering engine: meshes, cameras, resource registries, frame graphs, a renderer and frame pacing."""

__version__ = "0.1.0"
__all__ = [
    "backend",
    "camera",
    "descriptors",
    "frames",
    "framegraph",
    "manager",
    "mesh",
    "registry",
    "renderer",
]