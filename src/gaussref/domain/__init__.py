"""Domain layer — pure arithmetic with no I/O and no settings access."""
