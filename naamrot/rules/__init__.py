"""Rules — Ruleset models, YAML loading and exception matching."""
