"""image_editor.core — Foundation layer.

Contains the image data model, the pixel-map codec, and .env/settings loading.
This module has NO dependencies on image_editor.filters or image_editor.registry.
Only stdlib and numpy are allowed here.
"""
