"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class DuplicateEntityError(DomainError):
    """Raised when an entity would collide with another under the identity predicate."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} ({key}) already exists.")
        self.kind = kind
        self.key = key


class EntityNotFoundError(DomainError):
    """Raised when an entity expected to be in a collection is absent."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} ({key}) not found.")
        self.kind = kind
        self.key = key


# ============================================================================
#                       Collection specific errors
# ============================================================================


class DuplicatePersonError(DuplicateEntityError):
    """Raised when two persons would share the same identity."""

    def __init__(self, key: str) -> None:
        super().__init__("person", key)


class PersonNotFoundError(EntityNotFoundError):
    """Raised when a person cannot be found in the person list."""

    def __init__(self, key: str) -> None:
        super().__init__("person", key)


class DuplicateModuleError(DuplicateEntityError):
    """Raised when two modules would share the same module code."""

    def __init__(self, key: str) -> None:
        super().__init__("module", key)


class UnknownModuleError(EntityNotFoundError):
    """Raised when a module cannot be found in the module list."""

    def __init__(self, key: str) -> None:
        super().__init__("module", key)


class DuplicateTaskError(DuplicateEntityError):
    """Raised when two tasks would share the same module and description."""

    def __init__(self, key: str) -> None:
        super().__init__("task", key)


class TaskNotFoundError(EntityNotFoundError):
    """Raised when a task cannot be found in the task list."""

    def __init__(self, key: str) -> None:
        super().__init__("task", key)


# ============================================================================
#                           Task tag errors
# ============================================================================


class TagAlreadyExistsError(DomainError):
    """Raised when a task already carries a tag of the kind being attached."""

    def __init__(self, tag_kind: str, task: str) -> None:
        super().__init__(f"Task {task} already has a {tag_kind} tag.")
        self.tag_kind = tag_kind
        self.task = task


class PriorityTagAlreadyExistsError(TagAlreadyExistsError):
    """Raised when attaching a second priority tag to a task."""

    def __init__(self, task: str) -> None:
        super().__init__("priority", task)


class DeadlineTagAlreadyExistsError(TagAlreadyExistsError):
    """Raised when attaching a second deadline tag to a task."""

    def __init__(self, task: str) -> None:
        super().__init__("deadline", task)
