"""Core types and the File wrapper for goodfiles."""
