"""Background remover jobs backend."""
