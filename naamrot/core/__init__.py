"""Core — segment model, contexts, logging and pipeline engine."""
