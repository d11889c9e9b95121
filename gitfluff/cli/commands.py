"""CLI Commands"""

import os
import sys
from pathlib import Path

from gitfluff.git import HookKind, install_hook
from gitfluff.output import bold, dim, info, print_success
from gitfluff.presets import DEFAULT_PRESET, PRESET_ALIASES, PRESETS


def run_hook_install(kind: HookKind, write: bool, force: bool) -> int:
    """Install a git hook in the current repository."""
    path = install_hook(Path.cwd(), kind, write=write, force=force)
    print_success(f"Installed {kind.value} hook at {path}")
    return 0


def display_presets() -> int:
    """List presets with their aliases and policies."""
    print(f"\n{bold('Available Presets')}\n")
    for name, preset in PRESETS.items():
        aliases = [alias for alias, target in PRESET_ALIASES.items() if target == name]
        label = f"{name} (default)" if name == DEFAULT_PRESET else name
        print(f"  {info(label)}")
        print(f"    {preset.description}")
        print(dim(f"    body: {preset.body_policy.value}, conventional grammar: "
                  f"{'on' if preset.enforce_spec else 'off'}"))
        if aliases:
            print(dim(f"    aliases: {', '.join(aliases)}"))
    print()
    return 0


def run_install_completion() -> int:
    """Show how to enable shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    line = 'eval "$(register-python-argcomplete gitfluff)"'
    if 'zsh' in shell or 'bash' in shell:
        rc_file = '~/.zshrc' if 'zsh' in shell else '~/.bashrc'
        print(f"Add this line to {dim(os.path.expanduser(rc_file))}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell gitfluff | Out-String | Invoke-Expression\n")
        print("To make it permanent, add the same line to your $PROFILE")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish gitfluff | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
