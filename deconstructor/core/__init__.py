"""Core layer: data models and LLM providers."""
