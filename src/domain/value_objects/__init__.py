"""Domain value objects.

Immutable value objects that enforce their own constraints.
"""

from src.domain.value_objects.email_message import EmailMessage

__all__ = ["EmailMessage"]
