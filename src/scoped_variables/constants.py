"""Well-known variable and environment names used by the job runner."""

# Variables
BUILD_NUMBER = "build.number"
STEP_DEBUG = "ACTIONS_STEP_DEBUG"
PHASE_DISPLAY_NAME = "system.phaseDisplayName"
SYSTEM_ACCESS_TOKEN = "system.accessToken"
SYSTEM_GITHUB_TOKEN = "system.github.token"

# Surfaced through a dedicated channel, never through the secrets context
RESERVED_SECRET_NAMES = (SYSTEM_ACCESS_TOKEN, SYSTEM_GITHUB_TOKEN)

# Feature flags
ALLOW_RUNNER_CONTAINER_HOOKS = "DistributedTask.AllowRunnerContainerHooks"

# Environment
CONTAINER_HOOKS_PATH = "ACTIONS_RUNNER_CONTAINER_HOOKS"
VARIABLES_FILE_ENV = "SCOPED_VARIABLES_FILE"
