"""
Feature modules live under this package.

Each module owns its blueprint, validation and SQL, while reusing the
platform primitives (config, DB engine, prepared-statement binding).
"""
