"""
Benchmark suite for ljson parsing and writing performance.

Compares ljson against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Also measures the lenient extensions (trailing commas, literal keys) that
only ljson accepts.
"""
