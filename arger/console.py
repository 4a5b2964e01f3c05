# Arger CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used for help and version output."""
from rich.console import Console

console = Console(highlight=False)
