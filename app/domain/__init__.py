"""
Domain layer package.

Contains pure business logic: entities, value objects, the search
translator, response normalizer, error classifier and port interfaces.
No framework imports, no IO, no side effects.
"""
