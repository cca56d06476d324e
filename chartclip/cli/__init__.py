from .cli import chartclip
