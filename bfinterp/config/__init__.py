from .settings import DEFAULT_CELL_COUNT, InterpreterConfig, config_from_mapping, load_config

__all__ = [
    "DEFAULT_CELL_COUNT",
    "InterpreterConfig",
    "config_from_mapping",
    "load_config",
]
