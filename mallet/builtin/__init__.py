"""The native function library registered into the global environment."""

from mallet.types.environment import Environment
from mallet.builtin import env_builtin, seq_builtin, map_builtin, io_builtin, atom_builtin

MODULES = (env_builtin, seq_builtin, map_builtin, io_builtin, atom_builtin)


def register(env: Environment) -> None:
    for module in MODULES:
        module.register(env)
