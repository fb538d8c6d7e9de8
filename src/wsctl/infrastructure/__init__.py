"""Infrastructure layer — filesystem search, override files, and tmux."""
