"""Domain layer: entities, value objects and field rules. No dependencies on outer layers."""

from roster.domain.entities import Appointment, Index, Person
from roster.domain.fields import Priority

__all__ = ["Appointment", "Index", "Person", "Priority"]
