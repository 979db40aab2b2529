"""Support namespace for small, dependency-light helpers.

Helpers here hold no business rules and must not import from the other
StudyBook packages. Import specific helpers from their defining modules.
"""
