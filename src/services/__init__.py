"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They own the transaction boundary: every public operation opens a session,
runs inside one transaction and commits or rolls back explicitly.

This layer contains:
- catalog: FilmService, catalog reads and edits
- order_rules: business rules for candidate orders
- ordering: OrderService, order queries and order placement
"""
