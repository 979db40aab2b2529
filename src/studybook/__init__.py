"""StudyBook

A command-driven organiser for contacts, university modules and the tasks
attached to those modules. Every edit is applied immutably and checked
against the uniqueness rules of the collection it touches.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
