"""Service layer: commands, their handlers and the bus that dispatches them."""
