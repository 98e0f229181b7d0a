"""
Benchmark suite for utf8pack UTF-8 encoding performance.

Compares lazy iteration against bulk encoders including:
- Python standard library str.encode
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures encoding speed and peak memory across different text profiles.
"""
