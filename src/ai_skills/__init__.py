"""ai-skills: install reusable AI assistant content into project and home directories.

Import from submodules:
- version: __version__
- sources: parse_source, fetch_skill
- operations.install: install_items, uninstall_item
- operations.bridge: generate_bridge_files, write_bridge_files
"""

from ai_skills.version import __version__ as __version__
