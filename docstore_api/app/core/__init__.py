"""Core building blocks: store, errors, configuration, logging and security."""
