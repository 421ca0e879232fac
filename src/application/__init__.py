"""Application layer - Use cases and orchestration.

CQRS structure:
- commands/: write requests and their handlers
- queries/: read requests and their handlers
- dtos/: view objects returned by handlers
- validators/: per-command input rules
- mappers/: entity <-> DTO conversion functions
- cqrs/: handler registry and dispatcher
"""
