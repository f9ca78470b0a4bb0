"""
Geocoding Module
--------------
Handles reverse geocoding operations to convert geographic coordinates to human-readable addresses.
Wraps the Geoapify and Google Geocoding APIs behind a single reverse() call returning an Address.
"""
