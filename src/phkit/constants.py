# phkit:header:start
#
#   project      : PHKit
#   file         : constants.py
#   file_relpath : src/phkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PHKIT_VERSION: str = get_version("phkit")

# Environment variable consulted by `phkit.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: str = "PHKIT_LOG_LEVEL"

# Optional table holding placeholder values inside a TOML values file
VALUES_TABLE_NAME: str = "values"

# Argument meaning "read the template from STDIN"
STDIN_SENTINEL: str = "-"
