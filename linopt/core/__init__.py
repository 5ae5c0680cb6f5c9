"""Core layer — models, probes, actions, engine and persistence."""
