from .registry import Registry, global_registry

__all__ = ["Registry", "global_registry"]
