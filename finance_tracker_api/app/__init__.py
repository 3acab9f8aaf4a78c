"""
Application package.

The project is organised into logical pieces: ``core`` (settings,
logging, database wiring, exceptions), ``models`` (ORM entities),
``repositories`` (generic persistence), ``schemas`` (pydantic DTOs)
and ``services`` (business rules per domain).
"""
