"""User-facing message templates shared by the command handlers."""

# --- Index errors ---
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_INVALID_MODULE_DISPLAYED_INDEX = "The module index provided is invalid"
MESSAGE_INVALID_TASK_DISPLAYED_INDEX = "The task index provided is invalid"

# --- Persons ---
MESSAGE_ADD_PERSON_SUCCESS = "New person added: {}"
MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {}"
MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person: {}"
MESSAGE_ADD_REMARK_SUCCESS = "Added remark to Person: {}"
MESSAGE_DELETE_REMARK_SUCCESS = "Removed remark from Person: {}"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"
MESSAGE_LIST_PERSONS_SUCCESS = "Listed all persons"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"

# --- Modules ---
MESSAGE_ADD_MODULE_SUCCESS = "New module added: {}"
MESSAGE_DELETE_MODULE_SUCCESS = "Deleted Module: {}"
MESSAGE_DELETE_MODULE_TASKS = " ({} tasks removed)"
MESSAGE_DUPLICATE_MODULE = "This module already exists in the module list"
MESSAGE_MODULE_NOT_FOUND = "The module {} does not exist. Add it with add-module first."
MESSAGE_LIST_MODULES_SUCCESS = "Listed all modules"

# --- Tasks ---
MESSAGE_ADD_TASK_SUCCESS = "New task added: {}"
MESSAGE_EDIT_TASK_SUCCESS = "Edited Task: {}"
MESSAGE_DELETE_TASK_SUCCESS = "Deleted Task: {}"
MESSAGE_MARK_TASK_SUCCESS = "Marked Task: {}"
MESSAGE_UNMARK_TASK_SUCCESS = "Unmarked Task: {}"
MESSAGE_TAG_TASK_SUCCESS = "Tagged Task: {}"
MESSAGE_PRIORITY_TAG_EXISTS = "This task already has a priority tag"
MESSAGE_DEADLINE_TAG_EXISTS = "This task already has a deadline tag"
MESSAGE_DUPLICATE_TASK = "This task already exists in the task list"
MESSAGE_LIST_TASKS_SUCCESS = "Listed all tasks"
MESSAGE_LIST_MODULE_TASKS_SUCCESS = "Listed all tasks of module {}"
MESSAGE_TASKS_LISTED_OVERVIEW = "{} tasks listed!"

# --- General ---
MESSAGE_CLEAR_SUCCESS = "StudyBook has been cleared!"
MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting StudyBook as requested ..."
MESSAGE_SAVE_FAILED = (
    "The change was applied but could not be saved to file: {}"
)
