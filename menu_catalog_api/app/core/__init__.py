"""Configuration, logging and HTTP error handling shared by the app."""
