"""Application layer: the contracts adapters implement."""
