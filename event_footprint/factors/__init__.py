"""Constant reference data: emission factors, benchmarks, prices, incentives."""
