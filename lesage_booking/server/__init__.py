"""FastAPI companion server exposing the password-recovery flows and public auth settings."""
