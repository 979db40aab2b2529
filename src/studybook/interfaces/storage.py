"""Storage interface definitions."""

import abc
import os

from studybook.model.address_book import AddressBookSnapshot

PathLike = str | os.PathLike[str]


class StorageError(Exception):
    """Raised when the stored data cannot be read or written."""


class DataLoadingError(StorageError):
    """Raised when stored data exists but is unreadable or invalid."""


class AddressBookStorage(abc.ABC):
    """Abstract base class for persisting the address book contents."""

    @abc.abstractmethod
    def load(self) -> AddressBookSnapshot | None:
        """Read the stored contents.

        Returns:
            AddressBookSnapshot | None: The stored contents, or None if nothing
            has been stored yet.

        Raises:
            DataLoadingError: If stored data exists but cannot be read or does
                not describe a valid address book.
        """

    @abc.abstractmethod
    def save(self, snapshot: AddressBookSnapshot) -> None:
        """Replace the stored contents with *snapshot*.

        Args:
            snapshot (AddressBookSnapshot): The contents to store.

        Raises:
            StorageError: If the contents cannot be written.
        """
