"""wsctl — find workspaces on disk and open them in tmux with composed layouts."""

__version__ = "0.4.0"
