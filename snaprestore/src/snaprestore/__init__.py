"""
snaprestore - Snapshot restore request construction

Assembles restore requests for a cluster snapshot service:
- Multi-index selection with wildcards, inclusions and exclusions
- Index renaming through regular expressions
- Repository-specific settings from objects, builders, JSON/YAML/properties
  text or plain mappings
- Listener-based hand-off to a cluster admin client
"""

__version__ = "0.1.0"
__author__ = "snaprestore Team"
