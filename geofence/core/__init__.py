"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- exceptions: Custom exception hierarchy
- log_sink: Diagnostic log destination resolution
"""
