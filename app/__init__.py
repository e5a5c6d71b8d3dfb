"""
DevFinder — search users by programming language.

Application package root. A small service using hexagonal
architecture (ports & adapters) in front of the GitHub GraphQL API.

Bounded contexts:
    - users: Cursor-paginated user search by language.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (GitHub GraphQL) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
