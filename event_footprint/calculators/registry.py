from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from event_footprint.models.enums import ImpactCategory

# Populated at import time by the @register_calculator decorators; read-only afterwards.
_REGISTRY: dict[str, CalculatorDefinition] = {}


@dataclass(frozen=True)
class CalculatorDefinition:
    """A footprint calculator and the breakdown category it feeds."""

    id: str
    label: str
    description: str
    category: ImpactCategory
    # formula parameter -> dotted EventConfiguration attribute path
    required_inputs: dict[str, str]
    calculate_fn: Callable[..., float]
    # keyword options the caller may pass through (e.g. tolerances)
    options: tuple[str, ...] = field(default_factory=tuple)
    unit: str = "kg_co2e"


def register_calculator(
    calculator_id: str,
    label: str,
    description: str,
    category: ImpactCategory,
    required_inputs: dict[str, str],
    options: tuple[str, ...] = (),
    unit: str = "kg_co2e",
) -> Callable:
    """Decorator to register a footprint formula in the calculator library."""

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        definition = CalculatorDefinition(
            id=calculator_id,
            label=label,
            description=description,
            category=category,
            required_inputs=required_inputs,
            calculate_fn=fn,
            options=options,
            unit=unit,
        )
        _REGISTRY[calculator_id] = definition
        return fn

    return decorator


def get_calculator(calculator_id: str) -> Optional[CalculatorDefinition]:
    """Look up a calculator definition by ID."""
    return _REGISTRY.get(calculator_id)


def get_all_calculators() -> dict[str, CalculatorDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)


def calculators_for(category: ImpactCategory) -> list[CalculatorDefinition]:
    return [d for d in _REGISTRY.values() if d.category is category]
