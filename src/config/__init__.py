"""
Configuration Module
------------------
Loads service settings from the process environment.
Validates the geocoding provider and its API key before the server starts.
"""
