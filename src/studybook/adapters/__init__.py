"""Concrete implementations of the interfaces in `studybook.interfaces`."""
