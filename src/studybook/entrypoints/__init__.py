"""Entrypoints (inbound adapters) for StudyBook.

Expose the application to the outside world. Read user input, pass it to the
`Logic` facade built by `studybook.bootstrap`, and present the results.

Dependency rule: obtain the application through `studybook.bootstrap`; avoid
importing `studybook.adapters` directly.
"""
