"""End-to-end tests of the ``run``, ``show`` and ``shell`` subcommands."""

import json
from pathlib import Path

# pylint: disable=magic-value-comparison


def _stored() -> dict:
    return json.loads(Path("studybook.json").read_text(encoding="utf-8"))


class TestRun:
    """Tests for ``studybook run``."""

    @staticmethod
    def test_add_module_is_saved(invoke):
        """A state-changing command writes the data file."""
        result = invoke("run", "add-module", "m/cs2103t", "n/Software", "Engineering", "c/4")
        assert result.exit_code == 0, result.output
        assert "New module added: CS2103T" in result.stderr
        assert _stored()["modules"] == [
            {
                "module_code": "CS2103T",
                "module_name": "Software Engineering",
                "module_credit": 4,
            }
        ]

    @staticmethod
    def test_listing_goes_to_stdout(seeded):
        """The list a command shows is printed as a table on stdout."""
        result = seeded("run", "list-tasks")
        assert result.exit_code == 0
        assert "Listed all tasks" in result.stderr
        assert "Listed all tasks" not in result.stdout
        for text in ("Tasks", "Finish UG", "Write tests", "HIGH", "31-10-2024"):
            assert text in result.stdout

    @staticmethod
    def test_mark_then_list(seeded):
        """Marking a task is remembered by the next invocation."""
        result = seeded("run", "mark", "1")
        assert result.exit_code == 0
        assert "Marked Task: CS2103T; Description: Finish UG" in result.stderr
        assert _stored()["tasks"][0]["status"] == "complete"

        result = seeded("run", "unmark", "1")
        assert result.exit_code == 0
        assert _stored()["tasks"][0]["status"] == "incomplete"

    @staticmethod
    def test_delete_module_cascades(seeded):
        """Deleting a module removes its tasks from the data file."""
        result = seeded("run", "delete-module", "1")
        assert result.exit_code == 0
        assert "Deleted Module: CS2103T (2 tasks removed)" in result.stderr
        stored = _stored()
        assert [m["module_code"] for m in stored["modules"]] == ["CS2101"]
        assert [t["description"] for t in stored["tasks"]] == ["Draft report"]

    @staticmethod
    def test_tag_task(seeded):
        """Tagging sets both tags in one command."""
        result = seeded("run", "tag", "1", "pr/low", "dl/01-11-2024")
        assert result.exit_code == 0, result.output
        task = _stored()["tasks"][0]
        assert task["priority"] == "LOW"
        assert task["deadline"] == "01-11-2024"

    @staticmethod
    def test_second_priority_tag_is_rejected(seeded):
        """A task that already has a priority tag cannot get another one."""
        before = _stored()
        result = seeded("run", "tag", "2", "pr/LOW")
        assert result.exit_code == 1
        assert "This task already has a priority tag" in result.stderr
        assert _stored() == before

    @staticmethod
    def test_unknown_module(invoke):
        """Adding a task to a module that does not exist fails."""
        result = invoke("run", "add-task", "m/CS9999", "d/Anything")
        assert result.exit_code == 1
        assert "The module CS9999 does not exist" in result.stderr
        assert not Path("studybook.json").exists()

    @staticmethod
    def test_invalid_index(seeded):
        """An index past the end of the displayed list fails."""
        result = seeded("run", "delete-task", "9")
        assert result.exit_code == 1
        assert "The task index provided is invalid" in result.stderr

    @staticmethod
    def test_invalid_format(invoke):
        """A command missing required prefixes reports its usage."""
        result = invoke("run", "add-module", "m/CS2103T")
        assert result.exit_code == 1
        assert "Invalid command format!" in result.stderr
        assert "add-module" in result.stderr

    @staticmethod
    def test_unknown_command(invoke):
        """An unknown command word is reported."""
        result = invoke("run", "frobnicate")
        assert result.exit_code == 1
        assert "Unknown command" in result.stderr

    @staticmethod
    def test_help(invoke):
        """``help`` prints the usage of every command on stdout."""
        result = invoke("run", "help")
        assert result.exit_code == 0
        for word in ("add:", "add-module:", "tag:", "exit:"):
            assert word in result.stdout

    @staticmethod
    def test_find_persons(invoke):
        """``find`` filters the persons table."""
        for line in (
            "add n/Alex Yeoh p/87438807 e/alexyeoh@example.com a/Blk 30",
            "add n/Bernice Yu p/99272758 e/berniceyu@example.com a/Blk 30",
        ):
            assert invoke("run", *line.split()).exit_code == 0
        result = invoke("run", "find", "alex")
        assert result.exit_code == 0
        assert "1 persons listed!" in result.stderr
        assert "Alex" in result.stdout
        assert "Bernice" not in result.stdout

    @staticmethod
    def test_command_text_is_required(invoke):
        """``run`` without a command is a usage error."""
        result = invoke("run")
        assert result.exit_code == 2


class TestShow:
    """Tests for ``studybook show``."""

    @staticmethod
    def test_show_all(seeded):
        """Without an argument every table is printed."""
        result = seeded("show")
        assert result.exit_code == 0
        for title in ("Persons", "Modules", "Tasks"):
            assert title in result.stdout
        assert "CS2101" in result.stdout

    @staticmethod
    def test_show_one_list(seeded):
        """A list name limits the output to that table."""
        result = seeded("show", "modules")
        assert result.exit_code == 0
        assert "Modules" in result.stdout
        assert "Tasks" not in result.stdout

    @staticmethod
    def test_show_does_not_write(invoke):
        """Showing an empty book leaves no data file behind."""
        result = invoke("show", "tasks")
        assert result.exit_code == 0
        assert not Path("studybook.json").exists()

    @staticmethod
    def test_unknown_list(invoke):
        """Only persons, modules and tasks can be shown."""
        result = invoke("show", "notes")
        assert result.exit_code == 2


class TestShell:
    """Tests for ``studybook shell``."""

    @staticmethod
    def test_session_until_exit(invoke):
        """Commands run in order and ``exit`` ends the session."""
        session = "\n".join(
            [
                "add-module m/CS2103T n/Software Engineering c/4",
                "add-task m/CS2103T d/Finish UG",
                "",
                "mark 1",
                "exit",
                "list-tasks",
            ]
        )
        result = invoke("shell", input=session + "\n")
        assert result.exit_code == 0, result.output
        assert "Welcome to StudyBook!" in result.stdout
        assert "Marked Task: CS2103T; Description: Finish UG" in result.stderr
        assert "Exiting StudyBook as requested ..." in result.stderr
        assert "Listed all tasks" not in result.stderr
        assert _stored()["tasks"][0]["status"] == "complete"

    @staticmethod
    def test_errors_do_not_end_the_session(invoke):
        """A failing command is reported and the next one still runs."""
        session = "mark 1\nadd-module m/CS2101 n/Effective Communication c/4\nexit\n"
        result = invoke("shell", input=session)
        assert result.exit_code == 0
        assert "The task index provided is invalid" in result.stderr
        assert "New module added: CS2101" in result.stderr

    @staticmethod
    def test_oversized_index_is_reported(invoke):
        """An index too long to be a number is a format error, not a crash."""
        session = "\n".join(
            [
                "mark " + "1" * 5000,
                "add-module m/CS2101 n/Effective Communication c/4",
                "exit",
            ]
        )
        result = invoke("shell", input=session)
        assert result.exit_code == 0
        assert "Invalid command format!" in result.stderr
        assert "New module added: CS2101" in result.stderr

    @staticmethod
    def test_end_of_input_leaves_the_shell(invoke):
        """Running out of input ends the session cleanly."""
        result = invoke("shell", input="list\n")
        assert result.exit_code == 0
        assert "Listed all persons" in result.stderr
        assert "Input closed; leaving StudyBook." in result.stderr
