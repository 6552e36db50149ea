"""Version 1 of the DocStore API."""
