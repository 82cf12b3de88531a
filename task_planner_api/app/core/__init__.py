"""Settings, logging, database setup and domain errors."""
