"""Per-game basketball stat tracking: models, metrics, persistence and reports."""
