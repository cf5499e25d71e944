"""UI package for the tiles terminal interface.

Textual widgets that render a projected layout: split containers,
Hello panels with their split/close buttons, and the application shell.
"""
