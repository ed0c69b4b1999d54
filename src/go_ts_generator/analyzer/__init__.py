"""
Analyzer package for the Go to TypeScript generator.

This package contains modules for:
- The name-keyed type registry
- Swag annotation based endpoint correlation
- Aggregation across multiple source roots
"""

from go_ts_generator.analyzer.aggregator import TypeAggregator
from go_ts_generator.analyzer.endpoint_correlator import EndpointCorrelator
from go_ts_generator.analyzer.type_registry import TypeRegistry

__all__ = [
    "EndpointCorrelator",
    "TypeAggregator",
    "TypeRegistry",
]
