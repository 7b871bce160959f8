"""Medical pedigree chart layout."""

from pedchart.config import LayoutConfig
from pedchart.errors import ConfigError, CycleError, PedigreeError
from pedchart.layout import GenealogyEngine, calculate_bounds
from pedchart.symbols import generate_genetic_symbol
from pedchart.validation import validate_genetic_consistency

__all__ = [
    "ConfigError",
    "CycleError",
    "GenealogyEngine",
    "LayoutConfig",
    "PedigreeError",
    "calculate_bounds",
    "generate_genetic_symbol",
    "validate_genetic_consistency",
]
