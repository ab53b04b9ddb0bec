"""
Casework Coach Web API.

FastAPI application exposing the action matcher, content generation,
knowledge administration, and caseworker records.
"""
