"""Board constants shared across store, controller, view and CLI modules."""

# Workflow stages in display order
CREATED = "CREATED"
IN_PROGRESS = "IN_PROGRESS"
RESOLVED = "RESOLVED"
DONE = "DONE"

STAGE_ORDER = (CREATED, IN_PROGRESS, RESOLVED, DONE)

STAGE_LABELS = {
    CREATED: "Created",
    IN_PROGRESS: "In progress",
    RESOLVED: "Resolved",
    DONE: "Done",
}

# Stage a task without status is shown under
DEFAULT_STAGE = CREATED

# Display-only priority values
PRIORITIES = ("LOW", "MEDIUM", "HIGH")

# Actor roles
ROLE_HEAD_MANAGER = "HEAD_MANAGER"
ROLE_HR_MANAGER = "HR_MANAGER"
ROLE_EMPLOYEE = "EMPLOYEE"

# Remote task service defaults
DEFAULT_BASE_URL = "http://127.0.0.1:8080"
DEFAULT_TASKS_PATH = "/tasks"
DEFAULT_STATUS_PATH = "/task-workflow"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Board copy
HINT_FULL = "Drag tasks to manage the whole team workflow."
HINT_VIEW_ONLY = "View all team tasks and their current status."
EMPTY_COLUMN_MESSAGE = "No tasks here."
UPDATING_MESSAGE = "Updating status..."
