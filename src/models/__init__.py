"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines coordinates, resolved addresses and the JSON bodies returned by the API.
"""
