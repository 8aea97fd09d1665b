"""ModelDB: a versioned catalog of AI model metadata refreshed from LiteLLM."""

__version__ = "0.1.0"
