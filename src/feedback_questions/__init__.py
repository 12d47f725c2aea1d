"""Editing and validation state for MCQ, MSQ and rank options feedback questions."""
