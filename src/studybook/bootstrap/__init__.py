"""Bootstrap (composition root) for StudyBook.

Assembles the application at runtime: loads the stored contents into a model,
binds the service-layer handlers to it through the message bus, and exposes a
small facade (`Logic`) for entrypoints.

Import rules:
- Entry points import *this* package for wiring.
- This package may import: `studybook.adapters`, `studybook.service_layer`,
  `studybook.interfaces`, `studybook.model`, `studybook.domain` and
  `studybook.config`.
- Inner layers must not import `studybook.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus, build_model

__all__ = ["AppContainer", "bootstrap", "build_message_bus", "build_model"]
