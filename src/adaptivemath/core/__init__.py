"""Core infrastructure: database, models, schemas, and input validation."""
