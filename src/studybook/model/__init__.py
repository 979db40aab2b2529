"""Collections and the in-memory model the commands operate on."""

from .address_book import AddressBook, AddressBookSnapshot
from .model_manager import ModelManager
from .unique_list import DistinctModuleList, DistinctTaskList, UniquePersonList

__all__ = [
    "AddressBook",
    "AddressBookSnapshot",
    "DistinctModuleList",
    "DistinctTaskList",
    "ModelManager",
    "UniquePersonList",
]
