# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-client).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    # Connectors
    "TODO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # REST API
    "TODO_API_BASE_URL": "REST base URL (default: https://jsonplaceholder.typicode.com).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for todo.log (default: .local/todo).",
    "TODO_EXPORT_PATH": "Default /export target (default: <data_dir>/page.html).",
}
