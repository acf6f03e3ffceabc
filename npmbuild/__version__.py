"""Version information for npmbuild."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the Build API or CLI flags
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Explicit terminal step
#         - execute() replaces "last run_script() runs everything"
#         - Typed error hierarchy (FilesystemError, ToolNotFoundError, ScriptExecutionError)
#         - Layered YAML/env configuration and the `npmbuild` CLI
#         - copy_file() alongside copy_items(); configurable exclusions
# 0.1.0 - Initial release
#         - copy_all / copy_items / run_script
#         - npm install (npm ci in release mode) before the first script
#         - NODE_ENV selection
