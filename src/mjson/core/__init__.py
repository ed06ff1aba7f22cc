"""Core de mjson.

Por qué:
- Aquí viven el pipeline (minify -> parse -> render -> color) y los modos de I/O.
- El Core no conoce Typer ni Rich consoles: solo opciones, resultados y hooks.
"""
