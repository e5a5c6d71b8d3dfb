"""
Users bounded context — domain layer.

This module contains all domain logic for the users context:
- Translating search parameters into upstream pagination arguments
- Normalizing partial upstream results into a stable schema
- Classifying upstream failures
"""
