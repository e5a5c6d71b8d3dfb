"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors and
upstream failures are consistently translated into API responses.
"""
