"""HTML parsing helpers for DocHarvest."""
