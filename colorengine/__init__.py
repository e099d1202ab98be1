"""colorengine: color-space conversions, text palettes and blend grids.

Pure functions over immutable values: no I/O, no shared state.
Only the standard library and pydantic are used here; the HTTP layer
(routers/, schemas/) depends on this package, never the other way round.
"""
