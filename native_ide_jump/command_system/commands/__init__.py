"""Built-in commands, discovered by the command registry."""
