"""User-facing messages and formatting of entities for feedback text."""

from roster.domain import Appointment, Person

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX = "The appointment index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): {}"


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def format_person(person: Person) -> str:
    """One-line summary of every field of a person."""
    parts = [
        person.name,
        f"Phone: {person.phone}",
        f"Email: {person.email}",
        f"Address: {person.address}",
        f"Priority: {person.priority}",
    ]
    if person.remark:
        parts.append(f"Remark: {person.remark}")
    parts.append("Tags: " + "".join(f"[{tag}]" for tag in sorted(person.tags)))
    return "; ".join(parts)


def format_appointment(appointment: Appointment) -> str:
    text = (
        f"{appointment.name}; Date: {appointment.date.isoformat()}; "
        f"From: {appointment.start:%H:%M}; To: {appointment.end:%H:%M}"
    )
    if appointment.description:
        text += f"; Description: {appointment.description}"
    return text
