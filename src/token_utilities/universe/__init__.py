from token_utilities.universe.generator import Universe, escape_class_name, generate_universe

__all__ = ["Universe", "escape_class_name", "generate_universe"]
