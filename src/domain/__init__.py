"""Domain layer - Pure business logic.

Entities, value objects and protocols (ports) for ticket management. The
domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Event, Category, Order, OrderDetail
- value_objects/: EmailMessage
- protocols/: repository, email, export and logging ports
"""
