"""NiceGUI web front-end for the catalog browser."""
