# MHGIT Default Configuration
# Default configuration as Python dict and YAML generator

from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "git": {
        "binary": "git",
        "env": {},
        "terminal_prompt": False,
    },
    "output": {
        "mode": "pipe",
        "verbose": False,
        "colored": True,
    },
    "init": {
        "initial_branch": None,
    },
}

_HEADER = """\
# mhgit configuration
#
# git.binary           executable spawned for every command
# git.env              extra environment variables passed to git
# git.terminal_prompt  let git ask for credentials (false = fail instead of hang)
# output.mode          pipe (capture git output) or print (git writes to the terminal)
# init.initial_branch  branch name used by 'mhgit init' (null = git's default)

"""


def generate_default_config() -> str:
    """
    Generate the default configuration as commented YAML.

    Returns:
        YAML string.
    """
    body = yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return _HEADER + body
