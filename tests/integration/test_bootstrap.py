"""Test the bootstrap function."""

import json
import logging

import pytest

from studybook.adapters.json_storage import JsonFileStorage
from studybook.adapters.memory_storage import InMemoryStorage
from studybook.bootstrap import AppContainer, bootstrap, build_message_bus, build_model
from studybook.bootstrap.bootstrap import inject_dependencies
from studybook.config import DATA_PATH_ENV_VAR
from studybook.interfaces.storage import AddressBookStorage, DataLoadingError
from studybook.model import AddressBookSnapshot, ModelManager
from studybook.service_layer import commands
from studybook.service_layer.handlers import COMMAND_HANDLERS
from studybook.service_layer.results import CommandResult
from tests.fixtures.entities import make_person, typical_snapshot

# pylint: disable=unused-argument
# pylint: disable=too-few-public-methods


class BrokenStorage(AddressBookStorage):
    """Storage whose data can never be loaded."""

    def load(self):
        raise DataLoadingError("corrupt")

    def save(self, snapshot):
        pass


class TestBuildModel:
    """Tests for the build_model function."""

    @staticmethod
    def test_loads_stored_snapshot():
        """Test that the stored contents end up in the model."""
        model = build_model(InMemoryStorage(typical_snapshot()))
        assert model.address_book.to_snapshot() == typical_snapshot()

    @staticmethod
    def test_nothing_stored(caplog):
        """Test that an empty store starts an empty model."""
        with caplog.at_level(logging.INFO):
            model = build_model(InMemoryStorage())
        assert model == ModelManager()
        assert "No stored data found; starting empty" in caplog.messages

    @staticmethod
    def test_unloadable_data_starts_empty(caplog):
        """Test that unusable data is logged and an empty model is used."""
        with caplog.at_level(logging.WARNING):
            model = build_model(BrokenStorage())
        assert model == ModelManager()
        assert any("could not be loaded" in m for m in caplog.messages)

    @staticmethod
    @pytest.mark.parametrize("content", [b"{not json", b"\xff\xfe\x00garbage"])
    def test_unreadable_file_starts_empty(tmp_path, caplog, content):
        """Test that a corrupt data file on disk gives an empty model."""
        path = tmp_path / "studybook.json"
        path.write_bytes(content)
        with caplog.at_level(logging.WARNING):
            model = build_model(JsonFileStorage(path))
        assert model == ModelManager()
        assert any("could not be loaded" in m for m in caplog.messages)

    @staticmethod
    def test_inconsistent_snapshot_starts_empty(caplog):
        """Test that a snapshot with duplicates is logged and dropped."""
        bad = AddressBookSnapshot(persons=(make_person(), make_person(phone="999")))
        with caplog.at_level(logging.WARNING):
            model = build_model(InMemoryStorage(bad))
        assert model == ModelManager()
        assert any("inconsistent" in m for m in caplog.messages)


class TestBuildMessageBus:
    """Tests for the build_message_bus function."""

    @staticmethod
    def test_handlers_get_the_model():
        """Test that handlers are bound to the model they operate on."""
        model = ModelManager()
        bus = build_message_bus(model, COMMAND_HANDLERS)
        bus.handle(commands.AddPerson(make_person()))
        assert bus.model is model
        assert model.has_person(make_person())

    @staticmethod
    def test_inject_dependencies_by_name():
        """Test that only parameters the handler declares are injected."""

        def handler(cmd, model):
            return CommandResult(f"{cmd}:{model}")

        def bare_handler(cmd):
            return CommandResult(str(cmd))

        deps = {"model": "M", "storage": "S"}
        assert inject_dependencies(handler, deps)("c").feedback_to_user == "c:M"
        assert inject_dependencies(bare_handler, deps)("c").feedback_to_user == "c"


class TestBootstrap:
    """Tests for the bootstrap function."""

    @staticmethod
    def test_with_explicit_storage():
        """Test that the given storage is wired in."""
        storage = InMemoryStorage(typical_snapshot())
        app = bootstrap(storage=storage)
        assert isinstance(app, AppContainer)
        assert app.storage is storage
        assert app.model is app.message_bus.model
        assert app.logic.model is app.model
        assert len(app.model.filtered_persons) == 3

    @staticmethod
    def test_with_data_path(tmp_path):
        """Test that a data path selects a JSON file storage."""
        path = tmp_path / "studybook.json"
        app = bootstrap(data_path=path)
        assert isinstance(app.storage, JsonFileStorage)
        assert app.storage.path == path

        app.logic.execute("add-module m/CS2103T n/Software Engineering c/4")
        document = json.loads(path.read_text(encoding="utf-8"))
        assert document["modules"][0]["module_code"] == "CS2103T"

    @staticmethod
    def test_data_path_from_environment(monkeypatch, tmp_path):
        """Test that the environment picks the file when no path is given."""
        path = tmp_path / "env.json"
        monkeypatch.setenv(DATA_PATH_ENV_VAR, str(path))
        app = bootstrap()
        assert app.storage.path == path

    @staticmethod
    def test_reload_sees_saved_state(tmp_path):
        """Test that a second bootstrap sees what the first one saved."""
        path = tmp_path / "studybook.json"
        first = bootstrap(data_path=path)
        first.logic.execute("add-module m/CS2101 n/Effective Communication c/4")
        first.logic.execute("add-task m/CS2101 d/Draft report")
        first.logic.execute("mark 1")

        second = bootstrap(data_path=path)
        assert second.model.address_book == first.model.address_book
        assert second.model.filtered_tasks[0].is_complete()
