"""Entity-component scene model with JSON loading, transform maths, OBJ meshes, materials and asset registries."""

__version__ = "0.1.0"