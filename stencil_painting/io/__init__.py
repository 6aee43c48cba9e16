"""Image file I/O built on Pillow."""
