"""In-memory storage backend.

Meant for tests and throwaway sessions: nothing survives the process. Saved
snapshots are kept in order so tests can inspect what was written.
"""

from studybook.interfaces.storage import AddressBookStorage, StorageError
from studybook.model.address_book import AddressBookSnapshot


class InMemoryStorage(AddressBookStorage):
    """AddressBookStorage that keeps the snapshots in a list.

    Args:
        initial: Snapshot returned by `load` until something is saved.
        fail_on_save: If True, every `save` raises `StorageError`.
    """

    def __init__(
        self, initial: AddressBookSnapshot | None = None, fail_on_save: bool = False
    ) -> None:
        self._initial = initial
        self.fail_on_save = fail_on_save
        self.saved: list[AddressBookSnapshot] = []

    def load(self) -> AddressBookSnapshot | None:
        return self.saved[-1] if self.saved else self._initial

    def save(self, snapshot: AddressBookSnapshot) -> None:
        if self.fail_on_save:
            raise StorageError("in-memory storage configured to fail")
        self.saved.append(snapshot)
