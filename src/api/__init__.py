"""
API Module
---------
Provides the HTTP endpoints of the location link service using FastAPI.
Features include:
- Generating shareable location links
- Serving the location capture page
- Reverse geocoding coordinates posted by the page
"""
