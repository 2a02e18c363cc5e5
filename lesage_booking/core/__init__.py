"""Shared configuration and logging for the booking client."""
