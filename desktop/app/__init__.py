"""Tkinter application package."""
