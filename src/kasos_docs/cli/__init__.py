"""
Command-line entry points: ``kasos-docs`` (build/extract/watch) and
``kasos-docs-update`` (daily update).
"""
