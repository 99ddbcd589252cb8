"""Shell integration for ``jump``.

A child process cannot change its parent's working directory, so
``pomelo jump`` only prints the bookmarked path.  ``pomelo init <shell>``
prints a small function to ``eval`` from the shell's rc file; the function
runs ``pomelo jump`` and ``cd``s into whatever it printed.

    eval "$(pomelo init bash)"          # ~/.bashrc
    eval "$(pomelo init zsh)"           # ~/.zshrc
    pomelo init fish | source           # ~/.config/fish/config.fish
"""

from __future__ import annotations

import re

DEFAULT_FUNCTION_NAME = "pj"

_POSIX_TEMPLATE = """\
{name}() {{
    if [ -z "$1" ]; then
        echo "usage: {name} <alias>" >&2
        return 2
    fi
    local __pomelo_dir
    __pomelo_dir="$(command {program} jump --alias "$1")" || return $?
    if [ -n "$__pomelo_dir" ]; then
        cd -- "$__pomelo_dir"
    fi
}}
"""

_FISH_TEMPLATE = """\
function {name} --description 'Jump to a pomelo bookmark'
    if test (count $argv) -eq 0
        echo "usage: {name} <alias>" >&2
        return 2
    end
    set -l __pomelo_dir (command {program} jump --alias $argv[1]); or return $status
    if test -n "$__pomelo_dir"
        cd -- $__pomelo_dir
    end
end
"""

TEMPLATES: dict[str, str] = {
    "bash": _POSIX_TEMPLATE,
    "zsh": _POSIX_TEMPLATE,
    "fish": _FISH_TEMPLATE,
}

SUPPORTED_SHELLS = tuple(sorted(TEMPLATES))

_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


def init_script(shell: str, name: str = DEFAULT_FUNCTION_NAME, program: str = "pomelo") -> str:
    """Return the wrapper function source for *shell*.

    Raises ``ValueError`` for an unsupported shell or a function name the
    shell would not accept.
    """
    check_function_name(name)
    template = TEMPLATES.get(shell)
    if template is None:
        raise ValueError(
            f"unsupported shell {shell!r} (choose from {', '.join(SUPPORTED_SHELLS)})"
        )
    return template.format(name=name, program=program)


def check_function_name(name: str) -> str:
    """Return *name* if every supported shell accepts it as a function name."""
    if not _NAME_RE.match(name):
        raise ValueError(f"invalid function name {name!r}")
    return name
