"""Pastime - puzzle game engines with a terminal front-end."""
