"""
Benchmark suite for jsontree parsing and serialization performance.

Compares jsontree against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)
"""
