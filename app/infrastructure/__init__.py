"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer, such as the GitHub GraphQL client.
"""
