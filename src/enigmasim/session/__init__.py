from .config import MachineConfig, load_config, load_default_config, read_config
from .processor import format_output, process_messages
from .reset import ResetDirective, apply_reset, parse_reset

__all__ = [
    "MachineConfig",
    "ResetDirective",
    "apply_reset",
    "format_output",
    "load_config",
    "load_default_config",
    "parse_reset",
    "process_messages",
    "read_config",
]
