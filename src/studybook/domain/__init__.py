"""Domain layer: value objects, entities and the errors they raise.

Nothing in this package performs I/O or knows about parsing, commands or
storage. Entities are immutable; every "change" returns a new instance.
"""
