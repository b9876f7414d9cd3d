"""Gradio editor UI."""
