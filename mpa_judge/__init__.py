"""
Shared MPA Judge tooling code.

This package is intended to hold code that is reused across the
operational scripts in `scripts/` (emulator seeding, repertoire import,
smoke-test reporting).

Script entrypoints should live outside this package and import from
`mpa_judge` rather than the other way around.
"""
