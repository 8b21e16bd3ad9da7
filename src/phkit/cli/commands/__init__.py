# phkit:header:start
#
#   project      : PHKit
#   file         : __init__.py
#   file_relpath : src/phkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PHKit contributors
#
# phkit:header:end

"""PHKit CLI subcommands."""
