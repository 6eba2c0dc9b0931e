"""
Shared building blocks for the API: the asyncpg pool and SQL helpers
(`db`) and logging setup (`log`).

Stock-specific SQL and logic live in `stocks/`.
"""
