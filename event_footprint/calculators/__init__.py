"""Footprint formulas and the registry the aggregator reads them from."""

from . import formulas  # noqa: F401  registers every calculator
from .registry import CalculatorDefinition, get_all_calculators, get_calculator

__all__ = ["CalculatorDefinition", "get_calculator", "get_all_calculators"]
