"""
Festival Atmosphere Simulator

Core modules:
- engine: per-hour atmosphere mutation rules
- models: core dataclasses
- registry: stage table loading and snapshots
- vocabulary: fixed label lists (configuration)
"""
