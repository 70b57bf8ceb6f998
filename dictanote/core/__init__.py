"""Core collaborators: LLM providers, storage backends, capture devices, spec reading."""
