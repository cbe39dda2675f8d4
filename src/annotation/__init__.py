# src/annotation/__init__.py - v1
"""Job-posting annotation: prompt, structured output schema, requester and request handler."""
