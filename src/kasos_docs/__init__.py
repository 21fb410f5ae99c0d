"""
kasos-docs - build tooling for the KasOS documentation site.

- kasos_docs.site: assembler, extractor and daily updater
- kasos_docs.core: errors, results, logging, settings
- kasos_docs.cli: ``kasos-docs`` and ``kasos-docs-update`` entry points
"""

__version__ = "1.2.1"
