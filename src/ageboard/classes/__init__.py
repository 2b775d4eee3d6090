"""Bundled autoload root.

Each file here defines the class it is named after and is loaded by
path through :class:`~ageboard.autoload.Autoloader`, never imported.
"""
